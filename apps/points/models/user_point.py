from django.conf import settings
from django.db import models
from django.db.models import Q


class UserPoint(models.Model):
    """Points balances for one user"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points')
    total_points = models.BigIntegerField(default=0, help_text="Lifetime earned points, used for rankings")
    redeemable_points = models.BigIntegerField(default=0, help_text="Points available to spend in the shop")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_points'
        verbose_name = 'User Points'
        verbose_name_plural = 'User Points'
        constraints = [
            models.CheckConstraint(
                condition=Q(redeemable_points__gte=0),
                name='user_points_redeemable_non_negative',
            ),
            models.CheckConstraint(
                condition=Q(total_points__gte=0),
                name='user_points_total_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.user} - {self.total_points}/{self.redeemable_points} points"

    def can_redeem(self, amount):
        return self.redeemable_points >= amount
