"""
Admin user management views.
"""
from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework.views import APIView

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response, error_response, paginate_queryset, query_id
from apps.points.serializers import PointsAdjustmentSerializer
from apps.points.services import PointService
from ..models import User
from ..serializers import UserListSerializer, UserDetailSerializer, AdminUserUpdateSerializer


class AdminUserListView(APIView):
    """GET /api/admin/users/?search=&role=&class_id=&status="""
    permission_classes = [IsSchoolAdmin]

    def get(self, request):
        users = User.objects.select_related('school_class__grade').prefetch_related('roles')

        search = request.GET.get('search', '').strip()
        if search:
            users = users.filter(
                Q(name__icontains=search) |
                Q(username__icontains=search) |
                Q(email__icontains=search) |
                Q(student_id__icontains=search)
            )

        role = request.GET.get('role')
        if role:
            users = users.filter(roles__slug=role).distinct()

        class_id = query_id(request, 'class_id')
        if class_id is not None:
            users = users.filter(school_class_id=class_id)

        registration_status = request.GET.get('status')
        if registration_status:
            users = users.filter(registration_status=registration_status)

        items, pagination = paginate_queryset(users, request)
        return success_response({
            'users': UserListSerializer(items, many=True).data,
            'pagination': pagination,
        })


class AdminUserDetailView(APIView):
    """GET / PUT / PATCH /api/admin/users/{id}/"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request, pk):
        user = get_object_or_404(User, pk=pk)
        return success_response(UserDetailSerializer(user).data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        user = get_object_or_404(User, pk=pk)
        serializer = AdminUserUpdateSerializer(user, data=request.data, partial=partial)
        if not serializer.is_valid():
            return error_response('Update failed', serializer.errors)

        user = serializer.save()
        return success_response(UserDetailSerializer(user).data, 'User updated successfully')


class AdminAdjustPointsView(APIView):
    """POST /api/admin/users/{id}/adjust-points/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request, pk):
        user = get_object_or_404(User, pk=pk)
        serializer = PointsAdjustmentSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid adjustment', serializer.errors)

        data = serializer.validated_data
        try:
            PointService.adjust_points(request.user, user, data['type'], data['amount'], data['reason'])
        except BusinessRuleError as e:
            return error_response(str(e))

        return success_response(PointService.get_balance(user), 'Points adjusted successfully')
