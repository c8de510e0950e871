from django.contrib import admin

from .models import Grade, SchoolClass, ClassStudent, ClassTeacher


class ClassStudentInline(admin.TabularInline):
    model = ClassStudent
    extra = 0
    raw_id_fields = ['student']


class ClassTeacherInline(admin.TabularInline):
    model = ClassTeacher
    extra = 0
    raw_id_fields = ['teacher']


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name']


@admin.register(SchoolClass)
class SchoolClassAdmin(admin.ModelAdmin):
    list_display = ['name', 'grade', 'head_teacher', 'created_at']
    list_filter = ['grade']
    search_fields = ['name', 'grade__name']
    raw_id_fields = ['head_teacher']
    inlines = [ClassTeacherInline, ClassStudentInline]
