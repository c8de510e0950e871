from django.conf import settings
from django.db import models


class OrderStatusHistory(models.Model):
    """Audit row written for every order status change"""
    order = models.ForeignKey('Order', on_delete=models.CASCADE, related_name='status_history')
    from_status = models.CharField(max_length=20, null=True, blank=True)
    to_status = models.CharField(max_length=20)
    note = models.TextField(blank=True)
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='order_status_changes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_status_history'
        ordering = ['created_at', 'id']
        verbose_name = 'Order Status History'
        verbose_name_plural = 'Order Status History'

    def __str__(self):
        return f"{self.order.order_no}: {self.from_status or '-'} -> {self.to_status}"
