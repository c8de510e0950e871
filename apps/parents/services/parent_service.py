"""
Parent service: binding children and reading their progress.
"""
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.common.exceptions import BusinessRuleError
from apps.points.services import PointService, RankingService
from ..models import ParentChild

logger = logging.getLogger(__name__)


class ParentService:
    """Service class for parent to child relations"""

    @staticmethod
    def bind_child(parent, student_id, relationship=ParentChild.RELATIONSHIP_OTHER):
        """
        Bind the student with ``student_id`` to ``parent``.

        Raises:
            BusinessRuleError: No such student, or the binding already exists
        """
        User = get_user_model()
        child = User.objects.with_role('student').filter(student_id=student_id).first()
        if child is None:
            raise BusinessRuleError('Student not found')

        if ParentChild.objects.filter(parent=parent, child=child).exists():
            raise BusinessRuleError('This child is already bound to your account')

        auto_approve = settings.PARENT_BINDING_AUTO_APPROVE
        binding = ParentChild.objects.create(
            parent=parent,
            child=child,
            relationship=relationship,
            is_approved=auto_approve,
            approved_at=timezone.now() if auto_approve else None,
        )
        logger.info(f"Parent {parent.id} bound child {child.id} (approved={auto_approve})")
        return binding

    @staticmethod
    def approve_binding(binding):
        if binding.is_approved:
            raise BusinessRuleError('Binding is already approved')

        binding.is_approved = True
        binding.approved_at = timezone.now()
        binding.save(update_fields=['is_approved', 'approved_at', 'updated_at'])
        logger.info(f"Binding {binding.id} approved")
        return binding

    @staticmethod
    def unbind_child(parent, child_id):
        """Returns True when a binding was removed"""
        deleted, _ = ParentChild.objects.filter(parent=parent, child_id=child_id).delete()
        if deleted:
            logger.info(f"Parent {parent.id} unbound child {child_id}")
        return bool(deleted)

    @staticmethod
    def get_children(parent):
        return ParentChild.objects.filter(parent=parent).select_related(
            'child', 'child__school_class__grade'
        )

    @staticmethod
    def get_approved_child(parent, child_id):
        """The child user when an approved binding exists, otherwise None"""
        binding = (
            ParentChild.objects.approved()
            .filter(parent=parent, child_id=child_id)
            .select_related('child')
            .first()
        )
        return binding.child if binding else None

    @staticmethod
    def child_points(child):
        data = PointService.get_balance(child)
        data.update(RankingService.get_user_ranks(child))
        return data

    @staticmethod
    def child_ranking(child):
        return {
            'overall_rank': RankingService.get_rank(child),
            'class_rank': RankingService.get_class_rank(child),
            'grade_rank': RankingService.get_grade_rank(child),
            'class_name': child.school_class.full_name if child.school_class_id else None,
        }
