from django.db import models
from django.db.models import F


class ProductQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Product.STATUS_ACTIVE)

    def in_stock(self):
        return self.filter(models.Q(stock=Product.UNLIMITED_STOCK) | models.Q(stock__gt=0))


class Product(models.Model):
    """Reward that can be exchanged for redeemable points"""
    UNLIMITED_STOCK = -1

    STATUS_ACTIVE = 'active'
    STATUS_INACTIVE = 'inactive'
    STATUS_OUT_OF_STOCK = 'out_of_stock'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
        (STATUS_OUT_OF_STOCK, 'Out of Stock'),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    image = models.CharField(max_length=500, blank=True, default='', help_text="Image URL or media path")
    points_required = models.PositiveIntegerField()
    stock = models.IntegerField(default=0, help_text="-1 means unlimited")
    category = models.ForeignKey(
        'ProductCategory', on_delete=models.SET_NULL, null=True, blank=True, related_name='products'
    )
    is_third_party = models.BooleanField(default=False, help_text="Fulfilled by an external provider")
    third_party_config = models.JSONField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status']),
            models.Index(fields=['category', 'status']),
        ]

    def __str__(self):
        return f"{self.name} ({self.points_required} points)"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE

    @property
    def has_unlimited_stock(self):
        return self.stock == self.UNLIMITED_STOCK

    def has_stock(self, quantity=1):
        return self.has_unlimited_stock or self.stock >= quantity

    def decrease_stock(self, quantity=1):
        """Decrement stock in the database; unlimited stock is left untouched"""
        if self.has_unlimited_stock:
            return
        Product.objects.filter(pk=self.pk).update(stock=F('stock') - quantity)
        self.refresh_from_db(fields=['stock'])

    def increase_stock(self, quantity=1):
        if self.has_unlimited_stock:
            return
        Product.objects.filter(pk=self.pk).update(stock=F('stock') + quantity)
        self.refresh_from_db(fields=['stock'])
