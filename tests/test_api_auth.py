"""
API tests for registration, login, logout and the current user profile.
"""
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from apps.users.models import User
from tests.factories import SchoolClassFactory, UserFactory, give_points


class RegisterApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.school_class = SchoolClassFactory()

    def payload(self, **overrides):
        data = {
            'role': 'student',
            'name': 'Han Meimei',
            'email': 'han@example.com',
            'password': 'secret123',
            'password_confirmation': 'secret123',
            'student_id': 'S2024001',
            'class_id': self.school_class.id,
        }
        data.update(overrides)
        return data

    def test_student_registration_is_pending(self):
        response = self.client.post('/api/auth/register/', self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body['code'], 201)
        self.assertEqual(body['data']['user']['registration_status'], 'pending')
        self.assertEqual(body['data']['user']['roles'], ['student'])
        self.assertNotIn('token', body['data'])

    def test_parent_registration_returns_tokens(self):
        response = self.client.post(
            '/api/auth/register/',
            self.payload(role='parent', student_id='', class_id=None, email='parent@example.com'),
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('token', response.json()['data'])

    def test_password_mismatch(self):
        response = self.client.post(
            '/api/auth/register/', self.payload(password_confirmation='other1234'), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password_confirmation', response.json()['errors'])

    def test_weak_password(self):
        response = self.client.post(
            '/api/auth/register/', self.payload(password='short', password_confirmation='short'), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_student_requires_student_id(self):
        response = self.client.post('/api/auth/register/', self.payload(student_id=''), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('student_id', response.json()['errors'])

    def test_duplicate_email(self):
        UserFactory(email='han@example.com')
        response = self.client.post('/api/auth/register/', self.payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.json()['errors'])


class LoginApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory(email='li@example.com', roles=['student'])

    def login(self, email='li@example.com', password='testpass123'):
        return self.client.post('/api/auth/login/', {'email': email, 'password': password}, format='json')

    def test_login_returns_tokens_and_profile(self):
        response = self.login(email='LI@example.com')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertIn('token', data)
        self.assertIn('refresh', data)
        self.assertEqual(data['user']['id'], self.user.id)

        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)
        self.assertEqual(self.user.last_login_ip, '127.0.0.1')

    def test_wrong_password(self):
        response = self.login(password='wrong-password')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_pending_user_is_refused(self):
        self.user.registration_status = User.STATUS_PENDING
        self.user.save()

        response = self.login()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertIn('pending', response.json()['msg'])

    def test_rejected_user_sees_reason(self):
        self.user.reject(UserFactory(roles=['admin']), 'Not a student here')

        response = self.login()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertIn('Not a student here', response.json()['msg'])

    def test_me_and_logout(self):
        give_points(self.user, 42)
        tokens = self.login().json()['data']
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['token']}")

        me = self.client.get('/api/auth/me/')
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.json()['data']['points'], {'total_points': 42, 'redeemable_points': 42})

        logout = self.client.post('/api/auth/logout/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(logout.status_code, status.HTTP_200_OK)

        refresh = self.client.post('/api/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(refresh.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_requires_authentication(self):
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['code'], 401)


class HealthCheckTests(TestCase):

    def test_health_is_public(self):
        response = APIClient().get('/api/health/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['database']['status'], 'healthy')
