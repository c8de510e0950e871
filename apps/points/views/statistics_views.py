"""
Admin points dashboard view.
"""
from rest_framework.decorators import api_view, permission_classes

from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response
from ..services import PointStatisticsService


@api_view(['GET'])
@permission_classes([IsSchoolAdmin])
def get_points_statistics(request):
    """GET /api/admin/points/statistics/"""
    return success_response(PointStatisticsService.get_dashboard())
