"""
Points views module.

All views are exported from this module to maintain backward compatibility.
"""
from .points_account_views import get_points_overview, get_points_history
from .ranking_views import get_points_ranking
from .award_views import award_points
from .statistics_views import get_points_statistics

__all__ = [
    'get_points_overview',
    'get_points_history',
    'get_points_ranking',
    'award_points',
    'get_points_statistics',
]
