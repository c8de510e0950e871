"""
Ranking service for leaderboards and a user's position in them.
"""
from django.contrib.auth import get_user_model

from ..models import UserPoint

RANKABLE_FIELDS = ('total_points', 'redeemable_points')


class RankingService:
    """Rank = number of users with strictly more points + 1"""

    @staticmethod
    def get_rank(user, field='total_points', queryset=None):
        if field not in RANKABLE_FIELDS:
            raise ValueError(f"Cannot rank by {field}")

        account = UserPoint.objects.filter(user=user).first()
        points = getattr(account, field) if account else 0
        queryset = UserPoint.objects.all() if queryset is None else queryset
        return queryset.filter(**{f'{field}__gt': points}).count() + 1

    @staticmethod
    def get_class_rank(user, field='total_points'):
        if not user.school_class_id:
            return None
        peers = UserPoint.objects.filter(user__school_class_id=user.school_class_id)
        return RankingService.get_rank(user, field, peers)

    @staticmethod
    def get_grade_rank(user, field='total_points'):
        if not user.grade_id:
            return None
        peers = UserPoint.objects.filter(user__grade_id=user.grade_id)
        return RankingService.get_rank(user, field, peers)

    @staticmethod
    def get_user_ranks(user):
        """Overall and redeemable rank plus the number of users ranked against"""
        return {
            'rank': RankingService.get_rank(user, 'total_points'),
            'redeemable_rank': RankingService.get_rank(user, 'redeemable_points'),
            'total_users': get_user_model().objects.count(),
        }

    @staticmethod
    def get_leaderboard(scope='all', class_id=None, grade_id=None, limit=50, sort_by='total_points'):
        """
        Top users by ``sort_by`` within the whole school, a class or a grade.

        Returns:
            list: dicts with rank, user_id, name, total_points, redeemable_points
        """
        if sort_by not in RANKABLE_FIELDS:
            sort_by = 'total_points'

        queryset = UserPoint.objects.select_related('user')
        if scope == 'class' and class_id:
            queryset = queryset.filter(user__school_class_id=class_id)
        elif scope == 'grade' and grade_id:
            queryset = queryset.filter(user__grade_id=grade_id)

        secondary = 'redeemable_points' if sort_by == 'total_points' else 'total_points'
        rows = queryset.order_by(f'-{sort_by}', f'-{secondary}', 'user_id')[:limit]

        return [
            {
                'rank': index,
                'user_id': row.user_id,
                'name': row.user.display_name,
                'total_points': row.total_points,
                'redeemable_points': row.redeemable_points,
            }
            for index, row in enumerate(rows, start=1)
        ]
