"""
API tests for points, the shop and orders.
"""
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from apps.orders.models import Order
from apps.orders.services import ExchangeService, VerificationCodeService
from apps.points.services import PointService
from apps.products.models import Product
from tests.factories import (
    ProductCategoryFactory, ProductFactory, SchoolClassFactory, StudentFactory,
    TeacherFactory, UserFactory, give_points
)


class PointsApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.school_class = SchoolClassFactory()
        self.student = StudentFactory(school_class=self.school_class)
        self.rival = StudentFactory(school_class=self.school_class)
        give_points(self.student, 100)
        give_points(self.rival, 300)
        PointService.deduct_redeemable_points(self.rival, 250, 'product_exchange')
        self.client.force_authenticate(self.student)

    def test_overview(self):
        data = self.client.get('/api/points/').json()['data']
        self.assertEqual(data['total_points'], 100)
        self.assertEqual(data['redeemable_points'], 100)
        self.assertEqual(data['rank'], 2)
        self.assertEqual(data['redeemable_rank'], 1)
        self.assertEqual(data['total_users'], 2)

    def test_history_filters_and_paginates(self):
        give_points(self.student, 5, source='activity')

        data = self.client.get('/api/points/history/', {'type': 'total', 'per_page': 1}).json()['data']
        self.assertEqual(len(data['transactions']), 1)
        self.assertEqual(data['pagination']['total'], 2)
        self.assertEqual(data['pagination']['total_pages'], 2)

        data = self.client.get('/api/points/history/', {'source': 'activ'}).json()['data']
        self.assertEqual(data['pagination']['total'], 2)

    def test_per_page_is_capped(self):
        data = self.client.get('/api/points/history/', {'per_page': 1000}).json()['data']
        self.assertEqual(data['pagination']['per_page'], 100)

    def test_ranking(self):
        data = self.client.get('/api/points/ranking/', {'type': 'class'}).json()['data']
        self.assertEqual([row['user_id'] for row in data], [self.rival.id, self.student.id])

        response = self.client.get('/api/points/ranking/', {'type': 'galaxy'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_teacher_awards_points_to_own_student(self):
        teacher = TeacherFactory(classes=[self.school_class])
        self.client.force_authenticate(teacher)

        response = self.client.post(
            '/api/points/award/',
            {'user_id': self.student.id, 'type': 'add', 'amount': 20, 'reason': 'Homework'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data']['total_points'], 120)

    def test_teacher_cannot_award_other_students(self):
        teacher = TeacherFactory(classes=[SchoolClassFactory()])
        self.client.force_authenticate(teacher)

        response = self.client.post(
            '/api/points/award/',
            {'user_id': self.student.id, 'type': 'add', 'amount': 20, 'reason': 'Homework'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_student_cannot_award(self):
        response = self.client.post(
            '/api/points/award/',
            {'user_id': self.rival.id, 'type': 'add', 'amount': 20, 'reason': 'Friend'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_award_deduct_beyond_balance(self):
        self.client.force_authenticate(UserFactory(roles=['admin']))
        response = self.client.post(
            '/api/points/award/',
            {'user_id': self.rival.id, 'type': 'deduct', 'amount': 51, 'reason': 'Late'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['msg'], 'Insufficient redeemable points')


class ShopApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.student = StudentFactory()
        give_points(self.student, 300)
        self.client.force_authenticate(self.student)
        self.category = ProductCategoryFactory(slug='stationery')
        self.product = ProductFactory(name='Notebook', points_required=100, stock=2, category=self.category)
        ProductFactory(name='Hidden', status=Product.STATUS_INACTIVE)

    def test_product_list_shows_active_only(self):
        data = self.client.get('/api/shop/products/').json()['data']
        self.assertEqual([p['name'] for p in data['products']], ['Notebook'])

    def test_product_filters(self):
        ProductFactory(name='Basketball')
        by_category = self.client.get('/api/shop/products/', {'category': 'stationery'}).json()['data']
        self.assertEqual([p['name'] for p in by_category['products']], ['Notebook'])

        by_search = self.client.get('/api/shop/products/', {'search': 'basket'}).json()['data']
        self.assertEqual([p['name'] for p in by_search['products']], ['Basketball'])

    def test_inactive_product_detail_is_404(self):
        hidden = Product.objects.get(name='Hidden')
        response = self.client.get(f'/api/shop/products/{hidden.id}/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_categories(self):
        data = self.client.get('/api/shop/categories/').json()['data']
        self.assertIn('stationery', [c['slug'] for c in data])

    def test_exchange_and_view_order(self):
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post('/api/shop/orders/', {'product_id': self.product.id}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.json()['data']
        self.assertEqual(data['status'], 'pending')
        self.assertIn('verification_code', data)

        detail = self.client.get(f"/api/shop/orders/{data['id']}/").json()['data']
        self.assertEqual(len(detail['verification_code']), 6)
        self.assertFalse(detail['verification_code_expired'])

        orders = self.client.get('/api/shop/orders/').json()['data']
        self.assertEqual(orders['pagination']['total'], 1)

    def test_exchange_with_shipping_info(self):
        response = self.client.post(
            '/api/shop/orders/',
            {
                'product_id': self.product.id,
                'shipping_info': {'name': 'Li Lei', 'phone': '13800138000', 'address': 'Dorm 3'},
            },
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        order = Order.objects.get()
        self.assertEqual(order.shipping_info['address'], 'Dorm 3')

    def test_exchange_without_enough_points(self):
        expensive = ProductFactory(points_required=301)
        response = self.client.post('/api/shop/orders/', {'product_id': expensive.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['msg'], 'Insufficient redeemable points')

    def test_pending_user_cannot_exchange(self):
        pending = StudentFactory(registration_status='pending')
        give_points(pending, 300)
        self.client.force_authenticate(pending)
        response = self.client.post('/api/shop/orders/', {'product_id': self.product.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_other_users_orders_are_hidden(self):
        order = ExchangeService.exchange(self.student, self.product)
        self.client.force_authenticate(StudentFactory())
        response = self.client.get(f'/api/shop/orders/{order.id}/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_regenerate_code(self):
        with self.captureOnCommitCallbacks(execute=True):
            order = ExchangeService.exchange(self.student, self.product)
        old_code = VerificationCodeService.get(order.order_no)
        VerificationCodeService.delete(order.order_no)

        response = self.client.post(f'/api/shop/orders/{order.id}/regenerate-code/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertFalse(data['verification_code_expired'])
        self.assertIsNotNone(old_code)
