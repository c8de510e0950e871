from django.contrib import admin

from .models import ParentChild


@admin.register(ParentChild)
class ParentChildAdmin(admin.ModelAdmin):
    list_display = ['parent', 'child', 'relationship', 'is_approved', 'approved_at', 'created_at']
    list_filter = ['is_approved', 'relationship']
    search_fields = ['parent__name', 'parent__email', 'child__name', 'child__student_id']
    raw_id_fields = ['parent', 'child']
