from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models
from django.utils import timezone


class SchoolUserManager(UserManager):
    """User manager with registration status shortcuts"""

    def pending(self):
        return self.filter(registration_status=User.STATUS_PENDING)

    def approved(self):
        return self.filter(registration_status=User.STATUS_APPROVED)

    def with_role(self, slugs):
        if isinstance(slugs, str):
            slugs = [slugs]
        return self.filter(roles__slug__in=slugs).distinct()


class User(AbstractUser):
    """School member: student, teacher, parent or administrator"""
    STATUS_PENDING = 'pending'
    STATUS_APPROVED = 'approved'
    STATUS_REJECTED = 'rejected'
    REGISTRATION_STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    name = models.CharField(max_length=100, blank=True)
    nickname = models.CharField(max_length=100, blank=True)
    email = models.EmailField(unique=True, null=True, blank=True)
    phone = models.CharField(max_length=20, null=True, blank=True)
    student_id = models.CharField(max_length=50, unique=True, null=True, blank=True)
    id_number = models.CharField(max_length=50, null=True, blank=True, help_text="National ID card number")
    avatar = models.URLField(max_length=500, null=True, blank=True)
    is_head_teacher = models.BooleanField(default=False)
    student_union_department = models.CharField(max_length=100, blank=True)
    last_login_ip = models.GenericIPAddressField(null=True, blank=True)

    school_class = models.ForeignKey(
        'classes.SchoolClass', on_delete=models.SET_NULL,
        null=True, blank=True, related_name='primary_students'
    )
    grade = models.ForeignKey(
        'classes.Grade', on_delete=models.SET_NULL,
        null=True, blank=True, related_name='members'
    )

    registration_status = models.CharField(
        max_length=20, choices=REGISTRATION_STATUS_CHOICES, default=STATUS_APPROVED
    )
    requires_review = models.BooleanField(default=False)
    reviewer = models.ForeignKey(
        'self', on_delete=models.SET_NULL, null=True, blank=True, related_name='reviewed_users'
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(blank=True)

    roles = models.ManyToManyField('users.Role', through='users.UserRole', related_name='users', blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SchoolUserManager()

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.name or self.username or f"User {self.id}"

    def save(self, *args, **kwargs):
        # Blank emails are stored as NULL so the unique index ignores them
        if not self.email:
            self.email = None
        if not self.student_id:
            self.student_id = None
        super().save(*args, **kwargs)

    @property
    def display_name(self):
        return self.name or self.nickname or self.username

    # Roles

    def has_role(self, roles):
        """True when the user holds the role slug, or any slug of a list"""
        if isinstance(roles, str):
            roles = [roles]
        return self.roles.filter(slug__in=list(roles)).exists()

    def has_permission(self, slug):
        return self.roles.filter(permissions__slug=slug).exists()

    def role_slugs(self):
        return list(self.roles.values_list('slug', flat=True))

    def assign_role(self, role, metadata=None):
        from .role import Role, UserRole

        if isinstance(role, str):
            role = Role.objects.get(slug=role)
        user_role, created = UserRole.objects.get_or_create(
            user=self, role=role, defaults={'metadata': metadata or {}}
        )
        if not created and metadata is not None:
            user_role.metadata = metadata
            user_role.save(update_fields=['metadata', 'updated_at'])
        return user_role

    def remove_role(self, role):
        from .role import UserRole

        slug = role if isinstance(role, str) else role.slug
        UserRole.objects.filter(user=self, role__slug=slug).delete()

    def sync_roles(self, roles):
        """Replace the user's roles with ``roles`` (slugs or Role instances)"""
        from .role import Role, UserRole

        slugs = [r if isinstance(r, str) else r.slug for r in roles]
        UserRole.objects.filter(user=self).exclude(role__slug__in=slugs).delete()
        for role in Role.objects.filter(slug__in=slugs):
            UserRole.objects.get_or_create(user=self, role=role)

    def role_metadata(self, slug):
        from .role import UserRole

        user_role = UserRole.objects.filter(user=self, role__slug=slug).first()
        return user_role.metadata if user_role else {}

    def update_role_metadata(self, slug, **values):
        from .role import UserRole

        user_role = UserRole.objects.get(user=self, role__slug=slug)
        user_role.metadata = {**(user_role.metadata or {}), **values}
        user_role.save(update_fields=['metadata', 'updated_at'])
        return user_role

    # Registration status

    def is_pending(self):
        return self.registration_status == self.STATUS_PENDING

    def is_approved(self):
        return self.registration_status == self.STATUS_APPROVED

    def is_rejected(self):
        return self.registration_status == self.STATUS_REJECTED

    def approve(self, reviewer):
        self.registration_status = self.STATUS_APPROVED
        self.reviewer = reviewer
        self.reviewed_at = timezone.now()
        self.rejection_reason = ''
        self.save(update_fields=[
            'registration_status', 'reviewer', 'reviewed_at', 'rejection_reason', 'updated_at'
        ])

    def reject(self, reviewer, reason=''):
        self.registration_status = self.STATUS_REJECTED
        self.reviewer = reviewer
        self.reviewed_at = timezone.now()
        self.rejection_reason = reason or ''
        self.save(update_fields=[
            'registration_status', 'reviewer', 'reviewed_at', 'rejection_reason', 'updated_at'
        ])

    # Classes

    def teaching_class_ids(self):
        return list(self.teaching_assignments.values_list('school_class_id', flat=True))

    def is_head_teacher_of(self, student):
        school_class = student.school_class
        return bool(school_class and school_class.head_teacher_id == self.id)

    def same_grade_as(self, other):
        return self.grade_id is not None and self.grade_id == other.grade_id

    def can_review(self, target):
        """
        Whether this user may approve or reject ``target``'s registration.

        Student union members need the head teacher first, then the grade director.
        """
        if self.pk == target.pk or not self.is_approved():
            return False

        if self.is_superuser or self.has_role(['super_admin', 'admin']):
            return True

        if target.has_role('student_union_member'):
            if not target.role_metadata('student_union_member').get('head_teacher_approved_by'):
                return self.is_head_teacher_of(target)
            return self.has_role('grade_director') and self.same_grade_as(target)

        if target.has_role('teacher'):
            return self.has_role('grade_director') and self.same_grade_as(target)

        if target.has_role('student'):
            return self.is_head_teacher_of(target)

        return False
