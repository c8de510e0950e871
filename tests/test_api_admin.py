"""
API tests for the admin endpoints: users, approvals, classes, orders and plugins.
"""
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from apps.classes.models import ClassStudent, ClassTeacher, SchoolClass
from apps.orders.models import Order
from apps.orders.services import ExchangeService, VerificationCodeService
from apps.plugins.models import Plugin
from apps.points.services import PointService
from apps.users.roles import get_or_create_role
from tests.factories import (
    GradeFactory, ProductFactory, SchoolClassFactory, StudentFactory, TeacherFactory,
    UserFactory, give_points
)


class AdminApiTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = UserFactory(roles=['admin'])
        self.client.force_authenticate(self.admin)


class AdminAccessTests(AdminApiTestCase):

    def test_non_admins_are_refused(self):
        self.client.force_authenticate(StudentFactory())
        for url in ('/api/admin/users/', '/api/admin/classes/', '/api/admin/orders/', '/api/admin/plugins/'):
            self.assertEqual(self.client.get(url).status_code, status.HTTP_403_FORBIDDEN, url)

    def test_grade_director_is_a_school_admin(self):
        self.client.force_authenticate(UserFactory(roles=['grade_director']))
        self.assertEqual(self.client.get('/api/admin/users/').status_code, status.HTTP_200_OK)


class AdminUserApiTests(AdminApiTestCase):

    def setUp(self):
        super().setUp()
        self.school_class = SchoolClassFactory()
        self.student = StudentFactory(name='Zhang San', school_class=self.school_class)
        self.teacher = TeacherFactory(name='Wang Wu')

    def test_list_filters(self):
        by_role = self.client.get('/api/admin/users/', {'role': 'teacher'}).json()['data']
        self.assertEqual([u['id'] for u in by_role['users']], [self.teacher.id])

        by_search = self.client.get('/api/admin/users/', {'search': 'zhang'}).json()['data']
        self.assertEqual([u['id'] for u in by_search['users']], [self.student.id])

        by_class = self.client.get('/api/admin/users/', {'class_id': self.school_class.id}).json()['data']
        self.assertEqual(by_class['pagination']['total'], 1)

    def test_update_syncs_roles(self):
        get_or_create_role('grade_director')
        response = self.client.put(
            f'/api/admin/users/{self.teacher.id}/',
            {'name': 'Wang Wu', 'roles': ['teacher', 'grade_director']},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.json())
        self.assertEqual(sorted(response.json()['data']['roles']), ['grade_director', 'teacher'])

    def test_update_rejects_taken_email(self):
        response = self.client.patch(
            f'/api/admin/users/{self.teacher.id}/', {'email': self.student.email}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_adjust_points(self):
        response = self.client.post(
            f'/api/admin/users/{self.student.id}/adjust-points/',
            {'type': 'add', 'amount': 50, 'reason': 'Competition winner'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(PointService.get_balance(self.student)['total_points'], 50)

        response = self.client.post(
            f'/api/admin/users/{self.student.id}/adjust-points/',
            {'type': 'deduct', 'amount': 51, 'reason': 'Too much'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_adjust_points_validates_amount(self):
        response = self.client.post(
            f'/api/admin/users/{self.student.id}/adjust-points/',
            {'type': 'add', 'amount': 0, 'reason': 'Nothing'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('amount', response.json()['errors'])


class ApprovalApiTests(AdminApiTestCase):

    def setUp(self):
        super().setUp()
        self.head_teacher = TeacherFactory()
        self.school_class = SchoolClassFactory(head_teacher=self.head_teacher)
        self.pending = StudentFactory(school_class=self.school_class, registration_status='pending')

    def test_list_for_head_teacher(self):
        self.client.force_authenticate(self.head_teacher)
        data = self.client.get('/api/admin/approvals/').json()['data']
        self.assertEqual([u['id'] for u in data['users']], [self.pending.id])
        self.assertEqual(data['statistics']['pending'], 1)

    def test_approve_and_reject(self):
        self.client.force_authenticate(self.head_teacher)
        response = self.client.post(f'/api/admin/approvals/{self.pending.id}/approve/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data']['status'], 'approved')

        other = StudentFactory(school_class=self.school_class, registration_status='pending')
        response = self.client.post(
            f'/api/admin/approvals/{other.id}/reject/', {'reason': 'Wrong class'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        other.refresh_from_db()
        self.assertEqual(other.rejection_reason, 'Wrong class')

    def test_reviewer_without_rights_gets_403(self):
        self.client.force_authenticate(TeacherFactory())
        response = self.client.post(f'/api/admin/approvals/{self.pending.id}/approve/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class ClassApiTests(AdminApiTestCase):

    def setUp(self):
        super().setUp()
        self.grade = GradeFactory(name='七年级')

    def test_create_and_list(self):
        response = self.client.post(
            '/api/admin/classes/', {'name': '1班', 'grade': self.grade.id}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        school_class = SchoolClass.objects.get(name='1班')
        StudentFactory(school_class=school_class)
        TeacherFactory(classes=[school_class])

        data = self.client.get('/api/admin/classes/', {'grade': self.grade.id}).json()['data']
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]['full_name'], '七年级1班')
        self.assertEqual(data[0]['student_count'], 1)
        self.assertEqual(data[0]['teacher_count'], 1)

    def test_assign_and_remove_teacher(self):
        school_class = SchoolClassFactory(grade=self.grade)
        teacher = TeacherFactory()
        url = f'/api/admin/classes/{school_class.id}/teachers/'

        response = self.client.post(url, {'teacher_id': teacher.id, 'subject': 'Maths'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(ClassTeacher.objects.get(school_class=school_class).subject, 'Maths')

        duplicate = self.client.post(url, {'teacher_id': teacher.id}, format='json')
        self.assertEqual(duplicate.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.delete(url, {'teacher_id': teacher.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(ClassTeacher.objects.exists())

    def test_add_student_sets_class_and_grade(self):
        school_class = SchoolClassFactory(grade=self.grade)
        student = StudentFactory()

        response = self.client.post(
            f'/api/admin/classes/{school_class.id}/students/', {'student_id': student.id}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        student.refresh_from_db()
        self.assertEqual(student.school_class, school_class)
        self.assertEqual(student.grade, self.grade)

    def test_delete_class_clears_roster(self):
        school_class = SchoolClassFactory(grade=self.grade)
        student = StudentFactory(school_class=school_class)

        response = self.client.delete(f'/api/admin/classes/{school_class.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(ClassStudent.objects.exists())
        student.refresh_from_db()
        self.assertIsNone(student.school_class)

    def test_grades(self):
        data = self.client.get('/api/admin/classes/grades/').json()['data']
        self.assertEqual([g['name'] for g in data], ['七年级'])


class AdminOrderApiTests(AdminApiTestCase):

    def setUp(self):
        super().setUp()
        self.student = StudentFactory()
        give_points(self.student, 500)
        self.product = ProductFactory(points_required=100)
        with self.captureOnCommitCallbacks(execute=True):
            self.order = ExchangeService.exchange(self.student, self.product)

    def test_list_and_detail(self):
        data = self.client.get('/api/admin/orders/', {'status': 'pending'}).json()['data']
        self.assertEqual(data['pagination']['total'], 1)

        detail = self.client.get(f'/api/admin/orders/{self.order.id}/').json()['data']
        self.assertEqual(detail['verification_code'], VerificationCodeService.get(self.order.order_no))

    def test_status_transition(self):
        response = self.client.post(
            f'/api/admin/orders/{self.order.id}/status/', {'status': 'processing', 'note': 'Packing'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(
            f'/api/admin/orders/{self.order.id}/status/', {'status': 'pending'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_verify_by_code(self):
        code = VerificationCodeService.get(self.order.order_no)
        response = self.client.post(
            f'/api/admin/orders/{self.order.id}/verify/', {'method': 'code', 'code': code}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.STATUS_COMPLETED)

    def test_verify_requires_method_fields(self):
        response = self.client.post(
            f'/api/admin/orders/{self.order.id}/verify/', {'method': 'id_card', 'name': 'x'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_number', response.json()['errors'])

    def test_statistics(self):
        data = self.client.get('/api/admin/orders/statistics/').json()['data']
        self.assertEqual(data['total'], 1)
        self.assertEqual(data['total_points_spent'], 100)


@override_settings(PLUGIN_CLASSES={
    'student_council': 'apps.plugins.builtin.student_council.StudentCouncilPlugin',
})
class PluginApiTests(AdminApiTestCase):

    def test_install_enable_disable_uninstall(self):
        listing = self.client.get('/api/admin/plugins/').json()['data']
        self.assertEqual(listing['installed'], [])
        self.assertFalse(listing['available'][0]['installed'])

        response = self.client.post('/api/admin/plugins/install/', {'slug': 'student_council'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        plugin_id = response.json()['data']['id']
        self.assertEqual(len(response.json()['data']['permissions']), 3)

        response = self.client.post(f'/api/admin/plugins/{plugin_id}/enable/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data']['status'], 'enabled')

        response = self.client.post(f'/api/admin/plugins/{plugin_id}/enable/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(f'/api/admin/plugins/{plugin_id}/disable/')
        self.assertEqual(response.json()['data']['status'], 'disabled')

        response = self.client.delete(f'/api/admin/plugins/{plugin_id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Plugin.objects.exists())

    def test_install_unknown_plugin(self):
        response = self.client.post('/api/admin/plugins/install/', {'slug': 'chess_club'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
