"""
Exchange service: redeem points for a product in one transaction.
"""
import logging
from typing import Dict, Optional

from django.db import transaction

from apps.common.exceptions import (
    InsufficientPointsError, OutOfStockError, ProductUnavailableError
)
from apps.points.services import PointService
from apps.products.models import Product
from ..models import Order, OrderStatusHistory
from ..signals import third_party_exchange_requested
from .verification_code_service import VerificationCodeService

logger = logging.getLogger(__name__)


class ExchangeService:
    """Service for product redemption"""

    @staticmethod
    def exchange(user, product: Product, shipping_info: Optional[Dict] = None) -> Order:
        """
        Exchange redeemable points for one unit of ``product``.

        Stock check, balance check, point deduction, order creation, stock
        decrement, code issuance and third-party dispatch share one
        transaction; any failure rolls all of them back.

        Raises:
            ProductUnavailableError: Product is not active
            OutOfStockError: No stock left
            InsufficientPointsError: Not enough redeemable points
        """
        with transaction.atomic():
            product = Product.objects.select_for_update().get(pk=product.pk)

            if not product.is_active:
                raise ProductUnavailableError("Product is not available")

            if not product.has_stock():
                raise OutOfStockError("Product out of stock")

            balance = PointService.get_balance(user)
            if balance['redeemable_points'] < product.points_required:
                raise InsufficientPointsError("Insufficient redeemable points")

            order_no = Order.generate_order_no()
            # Free products create the order without a ledger row
            if product.points_required > 0:
                PointService.deduct_redeemable_points(
                    user,
                    product.points_required,
                    'product_exchange',
                    {
                        'description': f"Exchanged for product: {product.name}",
                        'product_id': product.id,
                        'order_no': order_no,
                    },
                )

            order = Order.objects.create(
                order_no=order_no,
                user=user,
                product=product,
                points_spent=product.points_required,
                status=Order.STATUS_PENDING,
                shipping_info=shipping_info,
            )
            OrderStatusHistory.objects.create(
                order=order,
                from_status=None,
                to_status=Order.STATUS_PENDING,
                note='Order created',
                operator=user,
            )

            product.decrease_stock()
            VerificationCodeService.issue(order)

            if product.is_third_party:
                third_party_exchange_requested.send(sender=ExchangeService, order=order, product=product)

        logger.info(
            f"User {user.id} exchanged {order.points_spent} points for product {product.id} "
            f"(order {order.order_no})"
        )
        return order
