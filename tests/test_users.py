"""
Tests for registration, role helpers and registration review.
"""
from smtplib import SMTPException
from unittest.mock import patch

from django.core import mail
from django.test import TestCase

from apps.classes.models import ClassStudent, ClassTeacher
from apps.common.exceptions import BusinessRuleError, ReviewNotAllowedError
from apps.points.models import UserPoint
from apps.users.roles import get_or_create_role
from apps.users.services import ApprovalService, NotificationService, RegistrationService
from tests.factories import (
    GradeFactory, SchoolClassFactory, StudentFactory, TeacherFactory, UserFactory
)


class RegistrationServiceTests(TestCase):

    def setUp(self):
        self.school_class = SchoolClassFactory()

    def test_student_registration_waits_for_review(self):
        user = RegistrationService.register(
            'student', 'secret123', school_class=self.school_class,
            name='Han Meimei', email='han@example.com', student_id='S2024001'
        )

        self.assertTrue(user.is_pending())
        self.assertTrue(user.requires_review)
        self.assertEqual(user.username, 'han@example.com')
        self.assertTrue(user.has_role('student'))
        self.assertEqual(user.school_class, self.school_class)
        self.assertEqual(user.grade_id, self.school_class.grade_id)
        self.assertTrue(ClassStudent.objects.filter(student=user, school_class=self.school_class).exists())
        self.assertTrue(UserPoint.objects.filter(user=user).exists())

    def test_teacher_registration_creates_teaching_assignments(self):
        other = SchoolClassFactory(grade=self.school_class.grade)
        user = RegistrationService.register(
            'teacher', 'secret123', teaching_classes=[self.school_class, other],
            name='Wang Laoshi', email='wang@example.com'
        )

        self.assertTrue(user.is_pending())
        self.assertEqual(ClassTeacher.objects.filter(teacher=user).count(), 2)
        self.assertEqual(sorted(user.teaching_class_ids()), sorted([self.school_class.id, other.id]))
        self.assertEqual(user.grade_id, self.school_class.grade_id)

    def test_parent_is_approved_immediately(self):
        user = RegistrationService.register('parent', 'secret123', name='Parent', email='p@example.com')
        self.assertTrue(user.is_approved())
        self.assertFalse(user.requires_review)

    def test_resolve_classes_keeps_order_and_skips_unknown(self):
        other = SchoolClassFactory()
        classes = RegistrationService.resolve_classes([other.id, 999999, self.school_class.id])
        self.assertEqual(classes, [other, self.school_class])


class UserRoleTests(TestCase):

    def test_role_helpers(self):
        user = UserFactory(roles=['teacher'])

        self.assertTrue(user.has_role('teacher'))
        self.assertTrue(user.has_role(['admin', 'teacher']))
        self.assertFalse(user.has_role('admin'))

        user.assign_role(get_or_create_role('grade_director'))
        self.assertTrue(user.has_role('grade_director'))
        user.remove_role('grade_director')
        self.assertEqual(user.role_slugs(), ['teacher'])

    def test_sync_roles_replaces_set(self):
        user = UserFactory(roles=['teacher', 'grade_director'])
        UserFactory(roles=['admin'])
        user.sync_roles(['admin'])
        self.assertEqual(user.role_slugs(), ['admin'])

    def test_role_metadata(self):
        user = StudentFactory(roles=['student', 'student_union_member'])
        user.update_role_metadata('student_union_member', head_teacher_approved_by=7)
        self.assertEqual(user.role_metadata('student_union_member'), {'head_teacher_approved_by': 7})
        self.assertEqual(user.role_metadata('parent'), {})

    def test_blank_email_is_stored_as_null(self):
        first = UserFactory(email='')
        second = UserFactory(email='')
        first.refresh_from_db()
        second.refresh_from_db()
        self.assertIsNone(first.email)
        self.assertIsNone(second.email)


class ReviewFixtures:

    def setUp(self):
        self.grade = GradeFactory()
        self.head_teacher = TeacherFactory(grade=self.grade)
        self.school_class = SchoolClassFactory(grade=self.grade, head_teacher=self.head_teacher)
        self.director = UserFactory(roles=['grade_director'], grade=self.grade)
        self.admin = UserFactory(roles=['admin'])

        self.student = StudentFactory(school_class=self.school_class, registration_status='pending')
        self.teacher = TeacherFactory(grade=self.grade, registration_status='pending')


class ReviewRightsTests(ReviewFixtures, TestCase):

    def test_head_teacher_reviews_own_students(self):
        self.assertTrue(self.head_teacher.can_review(self.student))
        self.assertFalse(TeacherFactory(grade=self.grade).can_review(self.student))

    def test_grade_director_reviews_teachers_of_same_grade(self):
        self.assertTrue(self.director.can_review(self.teacher))
        other_director = UserFactory(roles=['grade_director'], grade=GradeFactory())
        self.assertFalse(other_director.can_review(self.teacher))

    def test_admin_reviews_anyone(self):
        self.assertTrue(self.admin.can_review(self.student))
        self.assertTrue(self.admin.can_review(self.teacher))

    def test_nobody_reviews_themselves(self):
        self.assertFalse(self.admin.can_review(self.admin))

    def test_pending_for_reviewer_filters(self):
        self.assertEqual(ApprovalService.pending_for_reviewer(self.head_teacher), [self.student])
        self.assertEqual(ApprovalService.pending_for_reviewer(self.director), [self.teacher])


class ApprovalServiceTests(ReviewFixtures, TestCase):

    def test_approve_student(self):
        with self.captureOnCommitCallbacks(execute=True):
            result = ApprovalService.approve(self.head_teacher, self.student)

        self.student.refresh_from_db()
        self.assertEqual(result, 'approved')
        self.assertTrue(self.student.is_approved())
        self.assertEqual(self.student.reviewer, self.head_teacher)
        self.assertIsNotNone(self.student.reviewed_at)
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn('approved', mail.outbox[0].subject)

    def test_reject_records_reason_and_emails(self):
        with self.captureOnCommitCallbacks(execute=True):
            ApprovalService.reject(self.director, self.teacher, 'Unknown teacher')

        self.teacher.refresh_from_db()
        self.assertTrue(self.teacher.is_rejected())
        self.assertEqual(self.teacher.rejection_reason, 'Unknown teacher')
        self.assertIn('Unknown teacher', mail.outbox[0].body)

    def test_review_outside_rights_is_refused(self):
        with self.assertRaises(ReviewNotAllowedError):
            ApprovalService.approve(self.head_teacher, self.teacher)

    def test_already_reviewed_is_refused(self):
        ApprovalService.approve(self.admin, self.student)
        self.student.refresh_from_db()
        with self.assertRaises(BusinessRuleError):
            ApprovalService.approve(self.admin, self.student)

    def test_union_member_needs_head_teacher_then_director(self):
        member = StudentFactory(
            roles=['student', 'student_union_member'],
            school_class=self.school_class,
            registration_status='pending',
        )

        self.assertFalse(self.director.can_review(member))
        self.assertEqual(ApprovalService.approve(self.head_teacher, member), 'head_teacher_approved')
        member.refresh_from_db()
        self.assertTrue(member.is_pending())
        self.assertEqual(
            member.role_metadata('student_union_member')['head_teacher_approved_by'], self.head_teacher.id
        )

        self.assertFalse(self.head_teacher.can_review(member))
        self.assertEqual(ApprovalService.approve(self.director, member), 'approved')
        member.refresh_from_db()
        self.assertTrue(member.is_approved())

    def test_admin_approves_union_member_in_one_step(self):
        member = StudentFactory(
            roles=['student', 'student_union_member'],
            school_class=self.school_class,
            registration_status='pending',
        )
        self.assertEqual(ApprovalService.approve(self.admin, member), 'approved')

    def test_statistics(self):
        stats = ApprovalService.get_statistics()
        self.assertEqual(stats['pending'], 2)
        self.assertEqual(stats['rejected'], 0)


class NotificationServiceTests(TestCase):

    def test_mail_failure_is_logged_not_raised(self):
        user = UserFactory()
        with patch('apps.users.services.notification_service.send_mail', side_effect=SMTPException('down')):
            self.assertFalse(NotificationService.send_registration_email(user.pk, 'approved'))

    def test_users_without_email_are_skipped(self):
        user = UserFactory(email='')
        self.assertFalse(NotificationService.send_registration_email(user.pk, 'approved'))
        self.assertEqual(len(mail.outbox), 0)
