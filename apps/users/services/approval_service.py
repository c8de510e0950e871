"""
Approval service for registration review.
"""
import logging

from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import BusinessRuleError, ReviewNotAllowedError
from ..models import User
from ..signals import registration_status_changed

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

HEAD_TEACHER_APPROVAL_KEY = 'head_teacher_approved_by'


class ApprovalService:
    """Service for approving and rejecting pending registrations"""

    @staticmethod
    def pending_for_reviewer(reviewer):
        """Pending users that ``reviewer`` is allowed to act on"""
        pending = User.objects.pending().select_related('school_class', 'grade').prefetch_related('roles')
        return [user for user in pending if reviewer.can_review(user)]

    @staticmethod
    def get_statistics():
        return {
            'pending': User.objects.filter(registration_status=User.STATUS_PENDING).count(),
            'approved': User.objects.filter(registration_status=User.STATUS_APPROVED).count(),
            'rejected': User.objects.filter(registration_status=User.STATUS_REJECTED).count(),
        }

    @staticmethod
    def _check_reviewable(reviewer, user):
        if not user.is_pending():
            raise BusinessRuleError('User registration is not pending')
        if not reviewer.can_review(user):
            raise ReviewNotAllowedError()

    @staticmethod
    @transaction.atomic
    def approve(reviewer, user):
        """
        Approve a registration.

        Student union members need two approvals unless an admin reviews: the
        head teacher's approval is recorded on the role and the user stays
        pending until the grade director approves.

        Returns:
            str: ``approved`` or ``head_teacher_approved``
        """
        ApprovalService._check_reviewable(reviewer, user)

        is_admin = reviewer.is_superuser or reviewer.has_role(['super_admin', 'admin'])
        if (not is_admin and user.has_role('student_union_member')
                and not user.role_metadata('student_union_member').get(HEAD_TEACHER_APPROVAL_KEY)):
            user.update_role_metadata(
                'student_union_member',
                **{
                    HEAD_TEACHER_APPROVAL_KEY: reviewer.id,
                    'head_teacher_approved_at': timezone.now().isoformat(),
                }
            )
            audit_logger.info(f"reviewer={reviewer.id} head-teacher approved user={user.id}")
            return 'head_teacher_approved'

        user.approve(reviewer)
        registration_status_changed.send(sender=ApprovalService, user=user, status=User.STATUS_APPROVED)
        audit_logger.info(f"reviewer={reviewer.id} approved user={user.id}")
        return User.STATUS_APPROVED

    @staticmethod
    @transaction.atomic
    def reject(reviewer, user, reason=''):
        ApprovalService._check_reviewable(reviewer, user)

        user.reject(reviewer, reason)
        registration_status_changed.send(sender=ApprovalService, user=user, status=User.STATUS_REJECTED)
        audit_logger.info(f"reviewer={reviewer.id} rejected user={user.id} reason={reason!r}")
        return User.STATUS_REJECTED
