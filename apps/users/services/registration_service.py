"""
Registration service: create a user with its role and class links.
"""
import logging

from django.db import transaction

from apps.classes.models import ClassTeacher, SchoolClass
from apps.classes.services import ClassService
from ..models import User
from ..roles import REVIEWED_ROLES, get_or_create_role

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for self-registration"""

    @staticmethod
    @transaction.atomic
    def register(role, password, school_class=None, teaching_classes=None, **fields):
        """
        Create a user registering as ``role`` (student, teacher or parent).

        Students and teachers wait for review; parents are approved at once.

        Args:
            role: Role slug
            password: Raw password
            school_class: SchoolClass a student joins
            teaching_classes: SchoolClass list a teacher teaches
            **fields: User model fields (email, name, phone, student_id, ...)

        Returns:
            User: The new user
        """
        requires_review = role in REVIEWED_ROLES
        username = fields.pop('username', None) or fields.get('email') or fields.get('student_id')

        user = User.objects.create_user(
            username=username,
            password=password,
            registration_status=User.STATUS_PENDING if requires_review else User.STATUS_APPROVED,
            requires_review=requires_review,
            **fields
        )
        user.assign_role(get_or_create_role(role))

        if role == 'student' and school_class is not None:
            ClassService.add_student(school_class, user)

        if role == 'teacher' and teaching_classes:
            for teaching_class in teaching_classes:
                ClassTeacher.objects.get_or_create(school_class=teaching_class, teacher=user)
            if user.grade_id is None:
                user.grade_id = teaching_classes[0].grade_id
                user.save(update_fields=['grade', 'updated_at'])

        logger.info(
            f"User {user.id} registered as {role} "
            f"({'pending review' if requires_review else 'approved'})"
        )
        return user

    @staticmethod
    def resolve_classes(class_ids):
        """Classes for the given ids, in the order given; unknown ids are skipped"""
        classes = SchoolClass.objects.in_bulk(class_ids)
        return [classes[class_id] for class_id in class_ids if class_id in classes]
