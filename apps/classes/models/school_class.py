from django.conf import settings
from django.db import models

from .grade import Grade


class SchoolClass(models.Model):
    """A class within a grade, with an optional head teacher"""
    name = models.CharField(max_length=50)
    grade = models.ForeignKey(Grade, on_delete=models.SET_NULL, null=True, blank=True, related_name='classes')
    head_teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
        null=True, blank=True, related_name='headed_classes'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'classes'
        ordering = ['grade__name', 'name']
        unique_together = ['grade', 'name']
        verbose_name = 'Class'
        verbose_name_plural = 'Classes'

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        grade_name = self.grade.name if self.grade_id else ''
        return f"{grade_name}{self.name}"


class ClassStudent(models.Model):
    school_class = models.ForeignKey(SchoolClass, on_delete=models.CASCADE, related_name='class_students')
    student = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='class_memberships')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'class_students'
        unique_together = ['school_class', 'student']
        verbose_name = 'Class Student'
        verbose_name_plural = 'Class Students'

    def __str__(self):
        return f"{self.student} in {self.school_class}"


class ClassTeacher(models.Model):
    school_class = models.ForeignKey(SchoolClass, on_delete=models.CASCADE, related_name='class_teachers')
    teacher = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='teaching_assignments')
    subject = models.CharField(max_length=50, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'class_teachers'
        unique_together = ['school_class', 'teacher']
        verbose_name = 'Class Teacher'
        verbose_name_plural = 'Class Teachers'

    def __str__(self):
        subject = f" ({self.subject})" if self.subject else ''
        return f"{self.teacher} teaches {self.school_class}{subject}"
