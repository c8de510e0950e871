import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.common.exceptions import InvalidStatusTransition


class OrderQuerySet(models.QuerySet):
    def for_user(self, user):
        return self.filter(user=user)

    def by_status(self, status):
        return self.filter(status=status)

    def pending_verification(self):
        return self.filter(verified_at__isnull=True).exclude(
            status__in=[Order.STATUS_CANCELLED, Order.STATUS_FAILED, Order.STATUS_COMPLETED]
        )


class Order(models.Model):
    """A product exchange paid with redeemable points"""
    STATUS_PENDING = 'pending'
    STATUS_PROCESSING = 'processing'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'
    STATUS_FAILED = 'failed'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
        (STATUS_FAILED, 'Failed'),
    ]

    # Terminal states have no outgoing transitions
    ALLOWED_TRANSITIONS = {
        STATUS_PENDING: {STATUS_PROCESSING, STATUS_COMPLETED, STATUS_CANCELLED, STATUS_FAILED},
        STATUS_PROCESSING: {STATUS_COMPLETED, STATUS_CANCELLED, STATUS_FAILED},
        STATUS_COMPLETED: set(),
        STATUS_CANCELLED: set(),
        STATUS_FAILED: set(),
    }

    order_no = models.CharField(max_length=32, unique=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='orders')
    product = models.ForeignKey('products.Product', on_delete=models.PROTECT, related_name='orders')
    points_spent = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    shipping_info = models.JSONField(null=True, blank=True)
    third_party_order_id = models.CharField(max_length=100, null=True, blank=True)
    metadata = models.JSONField(null=True, blank=True)
    verification_code_expires_at = models.DateTimeField(null=True, blank=True)
    verified_at = models.DateTimeField(null=True, blank=True)
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='verified_orders'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'status']),
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return f"Order {self.order_no} - {self.get_status_display()}"

    @staticmethod
    def generate_order_no():
        """ORD + YYYYMMDD + 6 uppercase alphanumerics"""
        date_part = timezone.localdate().strftime('%Y%m%d')
        return f"{settings.ORDER_NO_PREFIX}{date_part}{uuid.uuid4().hex[:6].upper()}"

    @property
    def is_verified(self):
        return self.verified_at is not None

    @property
    def is_terminal(self):
        return not self.ALLOWED_TRANSITIONS[self.status]

    def is_verification_code_expired(self):
        if not self.verification_code_expires_at:
            return True
        return self.verification_code_expires_at <= timezone.now()

    def can_transition_to(self, new_status):
        return new_status in self.ALLOWED_TRANSITIONS.get(self.status, set())

    def update_status(self, new_status, note='', operator=None):
        """
        Move the order to ``new_status`` and record the change.

        Raises:
            InvalidStatusTransition: If the state machine does not allow the move
        """
        from .status_history import OrderStatusHistory

        if not self.can_transition_to(new_status):
            raise InvalidStatusTransition(
                f"Cannot change order status from {self.status} to {new_status}"
            )

        from_status = self.status
        self.status = new_status
        self.save(update_fields=['status', 'updated_at'])

        return OrderStatusHistory.objects.create(
            order=self,
            from_status=from_status,
            to_status=new_status,
            note=note or '',
            operator=operator,
        )
