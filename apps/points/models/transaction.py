from django.conf import settings
from django.db import models


class PointTransaction(models.Model):
    """Append-only ledger row for one balance change"""
    TYPE_TOTAL = 'total'
    TYPE_REDEEMABLE = 'redeemable'
    TYPE_CHOICES = [
        (TYPE_TOTAL, 'Total Points'),
        (TYPE_REDEEMABLE, 'Redeemable Points'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='point_transactions')
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    amount = models.IntegerField()  # Positive for credit, negative for debit
    balance_after = models.BigIntegerField()  # Balance of this type after the change
    source = models.CharField(max_length=100, help_text="What caused the change, e.g. product_exchange")
    description = models.CharField(max_length=255, blank=True)
    metadata = models.JSONField(null=True, blank=True)
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
        null=True, blank=True, related_name='operated_point_transactions'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'point_transactions'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'type']),
            models.Index(fields=['created_at']),
        ]
        verbose_name = 'Point Transaction'
        verbose_name_plural = 'Point Transactions'

    def __str__(self):
        return f"{self.user} {self.amount:+d} {self.type} ({self.source})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Ledger rows are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Ledger rows cannot be deleted")

    @property
    def is_credit(self):
        return self.amount > 0

    @property
    def is_debit(self):
        return self.amount < 0
