"""
Leaderboard view.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response, query_id, ranking_limit
from ..services import RankingService


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_ranking(request):
    """
    Query params: type (all, class, grade), class_id, grade_id, limit, sort_by.
    ``class_id`` and ``grade_id`` default to the requesting user's own.
    """
    scope = request.GET.get('type', 'all')
    if scope not in ('all', 'class', 'grade'):
        return error_response('type must be one of: all, class, grade')

    rankings = RankingService.get_leaderboard(
        scope=scope,
        class_id=query_id(request, 'class_id') or request.user.school_class_id,
        grade_id=query_id(request, 'grade_id') or request.user.grade_id,
        limit=ranking_limit(request.GET.get('limit')),
        sort_by=request.GET.get('sort_by', 'total_points'),
    )
    return success_response(rankings)
