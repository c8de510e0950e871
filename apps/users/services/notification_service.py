"""
Registration notification service.
"""
import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

logger = logging.getLogger(__name__)

MESSAGES = {
    'approved': (
        'Your registration has been approved',
        'Hello {name},\n\nYour registration has been approved. You can now sign in.\n',
    ),
    'rejected': (
        'Your registration has been rejected',
        'Hello {name},\n\nYour registration has been rejected.\nReason: {reason}\n',
    ),
}


class NotificationService:
    """Service for registration status emails"""

    @staticmethod
    def queue_registration_email(user, status):
        """Send the email once the surrounding transaction commits"""
        if status not in MESSAGES:
            return
        transaction.on_commit(lambda: NotificationService.send_registration_email(user.pk, status))

    @staticmethod
    def send_registration_email(user_id, status):
        """Deliver the email; failures are logged and never raised"""
        from ..models import User

        user = User.objects.filter(pk=user_id).first()
        if user is None or not user.email:
            logger.info(f"Skipping registration email for user {user_id}: no email address")
            return False

        subject, body = MESSAGES[status]
        try:
            send_mail(
                subject,
                body.format(name=user.display_name, reason=user.rejection_reason or '-'),
                settings.DEFAULT_FROM_EMAIL,
                [user.email],
            )
        except (SMTPException, OSError) as e:
            logger.error(f"Failed to send registration {status} email to user {user_id}: {e}")
            return False

        logger.info(f"Registration {status} email sent to user {user_id}")
        return True
