"""
Class service for managing classes and their teacher/student rosters.
"""
import logging

from django.db import transaction
from django.db.models import Count

from apps.common.exceptions import BusinessRuleError
from ..models import SchoolClass, ClassStudent, ClassTeacher

logger = logging.getLogger(__name__)


class ClassService:
    """Service for class rosters"""

    @staticmethod
    def list_classes(grade_id=None):
        """Classes with student and teacher counts, optionally for one grade"""
        queryset = SchoolClass.objects.select_related('grade', 'head_teacher').annotate(
            student_count=Count('class_students', distinct=True),
            teacher_count=Count('class_teachers', distinct=True),
        )
        if grade_id:
            queryset = queryset.filter(grade_id=grade_id)
        return queryset

    @staticmethod
    @transaction.atomic
    def assign_teacher(school_class, teacher, subject=''):
        if ClassTeacher.objects.filter(school_class=school_class, teacher=teacher).exists():
            raise BusinessRuleError('Teacher already assigned to this class')

        assignment = ClassTeacher.objects.create(
            school_class=school_class, teacher=teacher, subject=subject or ''
        )
        logger.info(f"Teacher {teacher.id} assigned to class {school_class.id}")
        return assignment

    @staticmethod
    def remove_teacher(school_class, teacher):
        deleted, _ = ClassTeacher.objects.filter(school_class=school_class, teacher=teacher).delete()
        if not deleted:
            raise BusinessRuleError('Teacher is not assigned to this class')
        logger.info(f"Teacher {teacher.id} removed from class {school_class.id}")

    @staticmethod
    @transaction.atomic
    def add_student(school_class, student):
        """Place a student in a class; a student belongs to one class at a time"""
        if ClassStudent.objects.filter(school_class=school_class, student=student).exists():
            raise BusinessRuleError('Student already in this class')

        ClassStudent.objects.filter(student=student).delete()
        membership = ClassStudent.objects.create(school_class=school_class, student=student)

        student.school_class = school_class
        student.grade_id = school_class.grade_id
        student.save(update_fields=['school_class', 'grade', 'updated_at'])
        return membership

    @staticmethod
    @transaction.atomic
    def remove_student(school_class, student):
        deleted, _ = ClassStudent.objects.filter(school_class=school_class, student=student).delete()
        if not deleted:
            raise BusinessRuleError('Student is not in this class')

        if student.school_class_id == school_class.id:
            student.school_class = None
            student.save(update_fields=['school_class', 'updated_at'])

    @staticmethod
    @transaction.atomic
    def delete_class(school_class):
        """Delete a class together with its roster rows"""
        ClassStudent.objects.filter(school_class=school_class).delete()
        ClassTeacher.objects.filter(school_class=school_class).delete()
        school_class.primary_students.update(school_class=None)
        logger.info(f"Class {school_class.id} ({school_class.full_name}) deleted")
        school_class.delete()
