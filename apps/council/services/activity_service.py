"""
Council activity service: activity lifecycle, participants and point awards.
"""
import logging

from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from apps.common.exceptions import BusinessRuleError
from apps.points.services import PointService
from ..models import CouncilActivity, CouncilActivityParticipant, CouncilActivityPoint

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class CouncilActivityService:
    """Service for student council activities"""

    @staticmethod
    def list_activities(status=None):
        activities = CouncilActivity.objects.select_related('organizer').prefetch_related('participants')
        if status:
            activities = activities.filter(status=status)
        return activities

    @staticmethod
    def delete_activity(activity):
        """
        Raises:
            BusinessRuleError: If anyone has joined the activity
        """
        if activity.participants.exists():
            raise BusinessRuleError('Activity has participants and cannot be deleted')
        logger.info(f"Deleted council activity {activity.id}")
        activity.delete()

    @staticmethod
    @transaction.atomic
    def add_participant(activity, user):
        """
        Raises:
            BusinessRuleError: Closed or full activity, a non-student, or a duplicate
        """
        activity = CouncilActivity.objects.select_for_update().get(pk=activity.pk)
        if activity.is_closed:
            raise BusinessRuleError('Activity is closed')
        if not user.has_role('student'):
            raise BusinessRuleError('Only students can join activities')
        if activity.participants.filter(user=user).exists():
            raise BusinessRuleError('User is already a participant')
        if activity.is_full():
            raise BusinessRuleError('Activity is full')

        return CouncilActivityParticipant.objects.create(activity=activity, user=user)

    @staticmethod
    def remove_participant(activity, user):
        """
        Returns:
            bool: False when the user had not joined

        Raises:
            BusinessRuleError: If the participant has already been awarded
        """
        participant = activity.participants.filter(user=user).first()
        if participant is None:
            return False
        if participant.points_awarded:
            raise BusinessRuleError('Participant has already been awarded points')
        participant.delete()
        return True

    @staticmethod
    def award_points(activity, operator, note=''):
        """
        Credit ``points_reward`` to every participant not yet awarded.

        Each participant is credited once. When every participant has been
        awarded the activity is closed. Any failure rolls back the whole run.

        Returns:
            int: Number of participants awarded in this call
        """
        awarded = 0
        with transaction.atomic():
            activity = CouncilActivity.objects.select_for_update().get(pk=activity.pk)
            pending = activity.participants.select_related('user').filter(points_awarded=False)

            for participant in pending:
                if activity.points_reward > 0:
                    PointService.add_points(
                        participant.user,
                        activity.points_reward,
                        'council_activity',
                        {
                            'description': activity.title,
                            'activity_id': activity.id,
                            'note': note,
                        },
                        operator,
                    )
                CouncilActivityPoint.objects.create(
                    activity=activity,
                    user=participant.user,
                    amount=activity.points_reward,
                    note=note,
                )
                participant.points_awarded = True
                participant.awarded_at = timezone.now()
                participant.save(update_fields=['points_awarded', 'awarded_at', 'updated_at'])
                awarded += 1

            if awarded and not activity.participants.filter(points_awarded=False).exists():
                activity.status = CouncilActivity.STATUS_CLOSED
                activity.save(update_fields=['status', 'updated_at'])

        audit_logger.info(
            f"operator={operator.id} awarded activity={activity.id} participants={awarded} "
            f"points={activity.points_reward}"
        )
        return awarded

    @staticmethod
    def get_dashboard(recent=5):
        return {
            'total_activities': CouncilActivity.objects.count(),
            'active_activities': CouncilActivity.objects.active().count(),
            'total_participants': CouncilActivityParticipant.objects.count(),
            'points_awarded': CouncilActivityPoint.objects.aggregate(total=Sum('amount'))['total'] or 0,
            'recent_activities': list(
                CouncilActivity.objects.select_related('organizer')[:recent]
            ),
        }
