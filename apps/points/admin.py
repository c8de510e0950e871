from django.contrib import admin
from .models import UserPoint, PointTransaction


@admin.register(UserPoint)
class UserPointAdmin(admin.ModelAdmin):
    list_display = ['user', 'total_points', 'redeemable_points', 'updated_at']
    search_fields = ['user__username', 'user__name', 'user__student_id']
    readonly_fields = ['total_points', 'redeemable_points', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False  # Created automatically with the user


@admin.register(PointTransaction)
class PointTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'type', 'amount', 'balance_after', 'source', 'operator', 'created_at']
    list_filter = ['type', 'source', 'created_at']
    search_fields = ['user__username', 'user__name', 'description']
    readonly_fields = [field.name for field in PointTransaction._meta.fields]

    def has_add_permission(self, request):
        return False  # Ledger rows are written by PointService

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
