import logging

from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent once per ledger row with: user, amount, type, source, entry
points_changed = Signal()


@receiver(post_save, sender=get_user_model())
def create_points_account_for_new_user(sender, instance, created, **kwargs):
    """Create the points row for every new user"""
    if created:
        from .models import UserPoint

        UserPoint.objects.get_or_create(user=instance)


@receiver(points_changed)
def log_points_changed(sender, user, amount, type, source, **kwargs):
    logger.info(f"Points changed: user={user.id} type={type} amount={amount:+d} source={source}")
