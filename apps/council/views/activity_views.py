"""
Student council activity views.
"""
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes

from apps.common.exceptions import BusinessRuleError
from apps.common.utils import success_response, error_response, paginate_queryset
from ..permissions import CanViewCouncilActivities, CanManageCouncilActivities, CanAwardCouncilPoints
from ..serializers import (
    CouncilActivitySerializer, CouncilActivityDetailSerializer,
    ParticipantInputSerializer, AwardPointsSerializer
)
from ..services import CouncilActivityService


class CouncilActivityViewSet(viewsets.ModelViewSet):
    """
    Endpoints:
    - GET /api/student-council/activities/?status= - List activities
    - POST /api/student-council/activities/ - Create activity
    - GET /api/student-council/activities/{id}/ - Detail with participants
    - PUT/PATCH /api/student-council/activities/{id}/ - Update activity
    - DELETE /api/student-council/activities/{id}/ - Delete an activity nobody has joined
    - POST/DELETE /api/student-council/activities/{id}/participants/ - Add or remove a participant
    - POST /api/student-council/activities/{id}/award/ - Award points to participants
    """

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            permission_classes = [CanViewCouncilActivities]
        elif self.action == 'award':
            permission_classes = [CanAwardCouncilPoints]
        else:
            permission_classes = [CanManageCouncilActivities]
        return [permission() for permission in permission_classes]

    def get_queryset(self):
        return CouncilActivityService.list_activities(self.request.query_params.get('status'))

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return CouncilActivityDetailSerializer
        return CouncilActivitySerializer

    def list(self, request, *args, **kwargs):
        items, pagination = paginate_queryset(self.get_queryset(), request, default_page_size=15)
        return success_response({
            'activities': self.get_serializer(items, many=True).data,
            'pagination': pagination,
        })

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(organizer=request.user)
        return success_response(serializer.data, 'Activity created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Activity updated successfully')

    def destroy(self, request, *args, **kwargs):
        try:
            CouncilActivityService.delete_activity(self.get_object())
        except BusinessRuleError as e:
            return error_response(str(e))
        return success_response(None, 'Activity deleted successfully')

    @action(detail=True, methods=['post', 'delete'])
    def participants(self, request, pk=None):
        activity = self.get_object()
        serializer = ParticipantInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        try:
            if request.method == 'POST':
                CouncilActivityService.add_participant(activity, user)
                return success_response(None, 'Participant added successfully', status.HTTP_201_CREATED)
            if not CouncilActivityService.remove_participant(activity, user):
                return error_response('User is not a participant', status_code=status.HTTP_404_NOT_FOUND)
            return success_response(None, 'Participant removed successfully')
        except BusinessRuleError as e:
            return error_response(str(e))

    @action(detail=True, methods=['post'])
    def award(self, request, pk=None):
        activity = self.get_object()
        serializer = AwardPointsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        awarded = CouncilActivityService.award_points(
            activity, request.user, serializer.validated_data['note']
        )
        activity.refresh_from_db()
        return success_response(
            {'awarded': awarded, 'status': activity.status},
            f'Awarded {awarded} participants',
        )


@api_view(['GET'])
@permission_classes([CanViewCouncilActivities])
def council_dashboard(request):
    """GET /api/student-council/dashboard/"""
    stats = CouncilActivityService.get_dashboard()
    stats['recent_activities'] = CouncilActivitySerializer(stats['recent_activities'], many=True).data
    return success_response(stats)
