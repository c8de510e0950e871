"""
Points service for handling points operations.

Every balance change happens inside a transaction, writes a ledger row
carrying the resulting balance and sends ``points_changed``.
"""
import logging

from django.db import transaction

from apps.common.exceptions import BusinessRuleError, InsufficientPointsError
from ..models import UserPoint, PointTransaction
from ..signals import points_changed

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class PointService:
    """Service for handling points operations"""

    @staticmethod
    def get_or_create_account(user):
        """Get or create the points row for user"""
        account, created = UserPoint.objects.get_or_create(user=user)
        return account

    @staticmethod
    def _validate_amount(amount):
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise BusinessRuleError("Points amount must be a positive integer")

    @staticmethod
    def _record(user, type, amount, balance_after, source, description, metadata, operator):
        entry = PointTransaction.objects.create(
            user=user,
            type=type,
            amount=amount,
            balance_after=balance_after,
            source=source,
            description=description,
            metadata=metadata,
            operator=operator,
        )
        points_changed.send(
            sender=PointService,
            user=user,
            amount=amount,
            type=type,
            source=source,
            entry=entry,
        )
        return entry

    @staticmethod
    def add_points(user, amount, source, metadata=None, operator=None):
        """
        Add points to both the total and redeemable balances.

        Args:
            user: User receiving the points
            amount: Positive number of points
            source: What caused the change, e.g. ``manual_adjust`` or ``council_activity``
            metadata: Optional dict stored on both ledger rows; ``description`` overrides the default text
            operator: User who granted the points, if any

        Returns:
            UserPoint: The updated balances
        """
        PointService._validate_amount(amount)
        metadata = metadata or {}

        with transaction.atomic():
            account, _ = UserPoint.objects.select_for_update().get_or_create(user=user)
            account.total_points += amount
            account.redeemable_points += amount
            account.save(update_fields=['total_points', 'redeemable_points', 'updated_at'])

            PointService._record(
                user, PointTransaction.TYPE_TOTAL, amount, account.total_points, source,
                metadata.get('description', f"Added {amount} total points"), metadata, operator
            )
            PointService._record(
                user, PointTransaction.TYPE_REDEEMABLE, amount, account.redeemable_points, source,
                metadata.get('description', f"Added {amount} redeemable points"), metadata, operator
            )

        logger.info(f"Added {amount} points to user {user.id} (source={source})")
        return account

    @staticmethod
    def deduct_redeemable_points(user, amount, source, metadata=None, operator=None):
        """
        Spend redeemable points. Total points are never reduced.

        Raises:
            InsufficientPointsError: If the user has no points row or too few redeemable points
        """
        PointService._validate_amount(amount)
        metadata = metadata or {}

        with transaction.atomic():
            account = UserPoint.objects.select_for_update().filter(user=user).first()
            if account is None or not account.can_redeem(amount):
                raise InsufficientPointsError("Insufficient redeemable points")

            account.redeemable_points -= amount
            account.save(update_fields=['redeemable_points', 'updated_at'])

            PointService._record(
                user, PointTransaction.TYPE_REDEEMABLE, -amount, account.redeemable_points, source,
                metadata.get('description', f"Deducted {amount} redeemable points"), metadata, operator
            )

        logger.info(f"Deducted {amount} redeemable points from user {user.id} (source={source})")
        return account

    @staticmethod
    def refund_redeemable_points(user, amount, source, metadata=None, operator=None):
        """Give back spent redeemable points, e.g. when an order is cancelled"""
        PointService._validate_amount(amount)
        metadata = metadata or {}

        with transaction.atomic():
            account, _ = UserPoint.objects.select_for_update().get_or_create(user=user)
            account.redeemable_points += amount
            account.save(update_fields=['redeemable_points', 'updated_at'])

            PointService._record(
                user, PointTransaction.TYPE_REDEEMABLE, amount, account.redeemable_points, source,
                metadata.get('description', f"Refunded {amount} redeemable points"), metadata, operator
            )

        logger.info(f"Refunded {amount} redeemable points to user {user.id} (source={source})")
        return account

    @staticmethod
    def adjust_points(operator, target, adjustment, amount, reason):
        """
        Manual adjustment by staff. ``adjustment`` is ``add`` or ``deduct``.

        Returns:
            UserPoint: The updated balances
        """
        metadata = {
            'description': reason,
            'operator_id': operator.id,
        }
        if adjustment == 'add':
            account = PointService.add_points(target, amount, 'manual_adjust', metadata, operator)
        elif adjustment == 'deduct':
            account = PointService.deduct_redeemable_points(target, amount, 'manual_adjust', metadata, operator)
        else:
            raise BusinessRuleError(f"Unknown adjustment type: {adjustment}")

        audit_logger.info(
            f"operator={operator.id} {adjustment} {amount} points user={target.id} reason={reason!r}"
        )
        return account

    @staticmethod
    def get_balance(user):
        """Current balances, zeros when the user has never had points"""
        account = UserPoint.objects.filter(user=user).first()
        if account is None:
            return {'total_points': 0, 'redeemable_points': 0}
        return {
            'total_points': account.total_points,
            'redeemable_points': account.redeemable_points,
        }

    @staticmethod
    def get_transaction_history(user, type=None, limit=50):
        """Ledger rows for user, newest first"""
        queryset = PointTransaction.objects.filter(user=user).select_related('operator')
        if type:
            queryset = queryset.filter(type=type)
        return list(queryset[:limit])

    @staticmethod
    def can_modify_points(operator, target):
        """
        Whether ``operator`` may award or deduct ``target``'s points.

        Rules are checked in order: never yourself, only approved operators,
        union members for any student, teachers for students in their classes,
        admins for anyone.
        """
        if operator.pk == target.pk:
            return False

        if not operator.is_approved():
            return False

        if operator.has_role('student_union_member') and target.has_role('student'):
            return True

        if operator.has_role('teacher') and target.has_role('student'):
            return target.school_class_id is not None and target.school_class_id in operator.teaching_class_ids()

        if operator.has_role(['admin', 'super_admin']):
            return True

        return False
