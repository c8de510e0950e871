"""
Order service for order queries, status changes, pickup verification and statistics.
"""
import logging
from typing import Dict, Optional

from django.db import transaction
from django.db.models import Count, Sum
from django.utils import timezone

from apps.common.exceptions import VerificationError
from apps.points.services import PointService
from ..models import Order
from .verification_code_service import VerificationCodeService

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

VERIFICATION_METHODS = ('code', 'password', 'id_card', 'direct')

# Orders ending in these states give the points and stock back
REFUNDED_STATUSES = (Order.STATUS_CANCELLED, Order.STATUS_FAILED)


class OrderService:
    """Service class for order business logic"""

    @staticmethod
    def get_user_orders(user, status: Optional[str] = None):
        orders = Order.objects.for_user(user).select_related('product')
        if status:
            orders = orders.by_status(status)
        return orders

    @staticmethod
    def get_user_order(user, order_id) -> Optional[Order]:
        return Order.objects.for_user(user).select_related('product').filter(pk=order_id).first()

    @staticmethod
    def get_verification_info(order: Order) -> Dict:
        """Current pickup code with its expiry, as shown to the order owner and admins"""
        code = VerificationCodeService.get(order.order_no)
        return {
            'verification_code': code,
            'verification_code_ttl': VerificationCodeService.get_ttl(order.order_no),
            'verification_code_expires_at': order.verification_code_expires_at if code else None,
            'verification_code_expired': code is None,
        }

    @staticmethod
    def regenerate_verification_code(order: Order) -> str:
        """
        Issue a new pickup code.

        Raises:
            VerificationError: If the order is already verified or finished
        """
        if order.is_verified:
            raise VerificationError('Order has already been verified')
        if order.status in (Order.STATUS_CANCELLED, Order.STATUS_COMPLETED, Order.STATUS_FAILED):
            raise VerificationError(f'Cannot regenerate code for a {order.status} order')

        code = VerificationCodeService.issue(order, regenerate=True)
        logger.info(f"Verification code regenerated for order {order.order_no}")
        return code

    @staticmethod
    def change_status(order: Order, new_status: str, note: str = '', operator=None):
        """
        Apply a status transition. Cancelled and failed orders are refunded
        and their stock restored.

        Raises:
            InvalidStatusTransition: If the transition is not allowed
        """
        with transaction.atomic():
            order = Order.objects.select_for_update().select_related('product', 'user').get(pk=order.pk)
            history = order.update_status(new_status, note, operator)

            if new_status in REFUNDED_STATUSES:
                if order.points_spent > 0:
                    PointService.refund_redeemable_points(
                        order.user,
                        order.points_spent,
                        'order_refund',
                        {
                            'description': f"Refund for order {order.order_no}",
                            'order_no': order.order_no,
                        },
                        operator,
                    )
                order.product.increase_stock()
                VerificationCodeService.delete(order.order_no)

        logger.info(f"Order {order.order_no} moved from {history.from_status} to {new_status}")
        return order

    @staticmethod
    def _check_credentials(order: Order, method: str, operator, credentials: Dict) -> bool:
        owner = order.user
        if method == 'code':
            return VerificationCodeService.verify(order.order_no, credentials.get('code'))
        if method == 'password':
            return bool(credentials.get('password')) and owner.check_password(credentials['password'])
        if method == 'id_card':
            return (
                bool(owner.id_number)
                and owner.id_number == credentials.get('id_number')
                and owner.name == credentials.get('name')
            )
        if method == 'direct':
            return bool(credentials.get('admin_password')) and operator.check_password(credentials['admin_password'])
        raise VerificationError(f"Unknown verification method: {method}")

    @staticmethod
    def verify_order(order: Order, method: str, operator, credentials: Dict) -> Order:
        """
        Confirm pickup of an order and complete it.

        Args:
            method: ``code``, ``password`` (owner's password), ``id_card``
                (owner's id number and name) or ``direct`` (operator's own password)
            credentials: Values the chosen method needs

        Raises:
            VerificationError: Already verified, not verifiable, or wrong credentials
        """
        if method not in VERIFICATION_METHODS:
            raise VerificationError(f"Unknown verification method: {method}")

        with transaction.atomic():
            order = Order.objects.select_for_update().select_related('user').get(pk=order.pk)

            if order.is_verified:
                raise VerificationError('Order has already been verified')
            if order.status in REFUNDED_STATUSES:
                raise VerificationError(f'Cannot verify a {order.status} order')

            if not OrderService._check_credentials(order, method, operator, credentials):
                raise VerificationError('Verification failed: invalid credentials')

            order.verified_at = timezone.now()
            order.verified_by = operator
            order.save(update_fields=['verified_at', 'verified_by', 'updated_at'])

            if order.status != Order.STATUS_COMPLETED:
                order.update_status(
                    Order.STATUS_COMPLETED, f"Order verified (method: {method})", operator
                )

        VerificationCodeService.delete(order.order_no)
        audit_logger.info(f"operator={operator.id} verified order={order.order_no} method={method}")
        return order

    @staticmethod
    def get_statistics(top: int = 5) -> Dict:
        counts = dict(
            Order.objects.values_list('status').annotate(total=Count('id')).order_by()
        )
        total_points_spent = (
            Order.objects.exclude(status__in=REFUNDED_STATUSES)
            .aggregate(total=Sum('points_spent'))['total'] or 0
        )
        top_products = list(
            Order.objects.exclude(status__in=REFUNDED_STATUSES)
            .values('product_id', 'product__name')
            .annotate(order_count=Count('id'), points=Sum('points_spent'))
            .order_by('-order_count', 'product_id')[:top]
        )

        return {
            'total': sum(counts.values()),
            'pending': counts.get(Order.STATUS_PENDING, 0),
            'processing': counts.get(Order.STATUS_PROCESSING, 0),
            'completed': counts.get(Order.STATUS_COMPLETED, 0),
            'cancelled': counts.get(Order.STATUS_CANCELLED, 0),
            'failed': counts.get(Order.STATUS_FAILED, 0),
            'total_points_spent': total_points_spent,
            'top_products': [
                {
                    'product_id': row['product_id'],
                    'name': row['product__name'],
                    'order_count': row['order_count'],
                    'points_spent': row['points'],
                }
                for row in top_products
            ],
        }
