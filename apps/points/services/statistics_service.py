"""
Points dashboard figures for administrators.
"""
from typing import Dict

from django.contrib.auth import get_user_model
from django.db.models import Sum
from django.utils import timezone

from ..models import PointTransaction, UserPoint


class PointStatisticsService:
    """Daily totals, top balances and the latest ledger activity"""

    @staticmethod
    def _sum(queryset) -> int:
        return queryset.aggregate(total=Sum('amount'))['total'] or 0

    @staticmethod
    def get_dashboard(top: int = 10, recent: int = 20) -> Dict:
        """
        Summary for the admin dashboard.

        ``today_added`` counts credited total points. ``today_deducted``
        counts spent redeemable points, since total points never go down.
        """
        start_of_day = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
        today = PointTransaction.objects.filter(created_at__gte=start_of_day)

        top_accounts = UserPoint.objects.select_related('user').order_by('-total_points', 'user_id')[:top]
        latest = PointTransaction.objects.select_related('user')[:recent]

        return {
            'total_users': get_user_model().objects.count(),
            'today_added': PointStatisticsService._sum(
                today.filter(type=PointTransaction.TYPE_TOTAL, amount__gt=0)
            ),
            'today_deducted': abs(PointStatisticsService._sum(
                today.filter(type=PointTransaction.TYPE_REDEEMABLE, amount__lt=0)
            )),
            'today_transactions': today.count(),
            'top_users': [
                {
                    'id': account.user_id,
                    'name': account.user.display_name,
                    'email': account.user.email or '',
                    'total_points': account.total_points,
                    'redeemable_points': account.redeemable_points,
                }
                for account in top_accounts
            ],
            'recent_transactions': [
                {
                    'id': entry.id,
                    'user_id': entry.user_id,
                    'user_name': entry.user.display_name,
                    'type': entry.type,
                    'amount': entry.amount,
                    'balance_after': entry.balance_after,
                    'source': entry.source,
                    'description': entry.description,
                    'created_at': entry.created_at,
                }
                for entry in latest
            ],
        }
