from django.contrib import admin
from .models import Order, OrderStatusHistory


class OrderStatusHistoryInline(admin.TabularInline):
    model = OrderStatusHistory
    extra = 0
    readonly_fields = ['from_status', 'to_status', 'note', 'operator', 'created_at']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_no', 'user', 'product', 'points_spent', 'status', 'verified_at', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['order_no', 'user__username', 'user__name', 'product__name']
    readonly_fields = [
        'order_no', 'user', 'product', 'points_spent', 'status', 'verified_at',
        'verified_by', 'verification_code_expires_at', 'created_at', 'updated_at'
    ]
    inlines = [OrderStatusHistoryInline]

    def has_add_permission(self, request):
        return False  # Orders are created by ExchangeService
