"""
Points award view for teachers, student union members and admins.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsPointOperator
from apps.common.utils import success_response, error_response
from ..serializers import AwardPointsSerializer
from ..services import PointService

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsPointOperator])
def award_points(request):
    """Add or deduct points for a student the operator is allowed to manage"""
    serializer = AwardPointsSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid award request', serializer.errors)

    data = serializer.validated_data
    target = data['target']
    if not PointService.can_modify_points(request.user, target):
        return error_response(
            'You are not allowed to modify this user\'s points',
            status_code=status.HTTP_403_FORBIDDEN
        )

    try:
        PointService.adjust_points(request.user, target, data['type'], data['amount'], data['reason'])
    except BusinessRuleError as e:
        return error_response(str(e))

    return success_response(PointService.get_balance(target), 'Points updated successfully')
