"""
Signals for users app
"""
import logging

from django.contrib.auth.signals import user_logged_in
from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with: user, status
registration_status_changed = Signal()


@receiver(registration_status_changed)
def notify_registration_status(sender, user, status, **kwargs):
    from .services import NotificationService

    NotificationService.queue_registration_email(user, status)


@receiver(user_logged_in)
def record_login_ip(sender, request, user, **kwargs):
    """Store the client address of the latest login"""
    if request is None:
        return
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    ip = forwarded.split(',')[0].strip() if forwarded else request.META.get('REMOTE_ADDR')
    if ip:
        user.last_login_ip = ip
        user.save(update_fields=['last_login_ip'])
        logger.info(f"User {user.id} logged in from {ip}")
