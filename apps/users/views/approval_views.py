"""
Registration review views.
"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.exceptions import BusinessRuleError, ReviewNotAllowedError
from apps.common.permissions import IsApprovedUser
from apps.common.utils import success_response, error_response
from ..models import User
from ..serializers import PendingUserSerializer, RejectSerializer
from ..services import ApprovalService


class ApprovalListView(APIView):
    """GET /api/admin/approvals/ - Registrations the current user may review"""
    permission_classes = [IsAuthenticated, IsApprovedUser]

    def get(self, request):
        pending = ApprovalService.pending_for_reviewer(request.user)
        return success_response({
            'users': PendingUserSerializer(pending, many=True).data,
            'statistics': ApprovalService.get_statistics(),
        })


class ApproveUserView(APIView):
    """POST /api/admin/approvals/{id}/approve/"""
    permission_classes = [IsAuthenticated, IsApprovedUser]

    def post(self, request, pk):
        user = get_object_or_404(User, pk=pk)
        try:
            result = ApprovalService.approve(request.user, user)
        except ReviewNotAllowedError as e:
            return error_response(str(e), status_code=status.HTTP_403_FORBIDDEN)
        except BusinessRuleError as e:
            return error_response(str(e))

        if result == 'head_teacher_approved':
            message = 'Head teacher approval recorded, waiting for grade director'
        else:
            message = 'User approved'
        return success_response({'status': result}, message)


class RejectUserView(APIView):
    """POST /api/admin/approvals/{id}/reject/"""
    permission_classes = [IsAuthenticated, IsApprovedUser]

    def post(self, request, pk):
        user = get_object_or_404(User, pk=pk)
        serializer = RejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = ApprovalService.reject(request.user, user, serializer.validated_data['reason'])
        except ReviewNotAllowedError as e:
            return error_response(str(e), status_code=status.HTTP_403_FORBIDDEN)
        except BusinessRuleError as e:
            return error_response(str(e))

        return success_response({'status': result}, 'User rejected')
