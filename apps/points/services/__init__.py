"""
Points services module.

All services are exported from this module to maintain backward compatibility.
"""
from .points_service import PointService
from .ranking_service import RankingService
from .statistics_service import PointStatisticsService

__all__ = [
    'PointService',
    'RankingService',
    'PointStatisticsService',
]
