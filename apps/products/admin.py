from django.contrib import admin
from .models import Product, ProductCategory


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent', 'sort_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'points_required', 'stock', 'category', 'is_third_party', 'status', 'created_at']
    list_filter = ['status', 'is_third_party', 'category']
    search_fields = ['name', 'description']
    list_editable = ['status']
