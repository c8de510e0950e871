"""
User serializers for list, detail, registration, and update operations.
"""
from rest_framework import serializers

from apps.classes.models import SchoolClass, Grade
from apps.common.validators import (
    validate_phone, validate_email_unique, validate_student_id_unique,
    validate_password_strength
)
from apps.points.services import PointService
from ..models import User, Role
from ..roles import REGISTRATION_ROLES
from ..services import RegistrationService


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = ['id', 'slug', 'name', 'level']


class UserListSerializer(serializers.ModelSerializer):
    """
    Serializer for user list view - minimal fields for list display.
    Used for: GET /api/admin/users/
    """
    roles = serializers.SlugRelatedField(many=True, read_only=True, slug_field='slug')
    class_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'username', 'name', 'email', 'student_id', 'roles', 'school_class',
            'class_name', 'registration_status', 'created_at'
        ]
        read_only_fields = fields

    def get_class_name(self, obj):
        return obj.school_class.full_name if obj.school_class_id else None


class UserDetailSerializer(UserListSerializer):
    """
    Serializer for user detail view.
    Used for: GET /api/auth/me/ and GET /api/admin/users/{id}/
    Does not include sensitive fields like password or id_number.
    """
    grade_name = serializers.CharField(source='grade.name', read_only=True, default=None)
    points = serializers.SerializerMethodField()

    class Meta(UserListSerializer.Meta):
        fields = UserListSerializer.Meta.fields + [
            'nickname', 'phone', 'avatar', 'grade', 'grade_name', 'is_head_teacher',
            'student_union_department', 'requires_review', 'reviewed_at',
            'rejection_reason', 'last_login', 'last_login_ip', 'points'
        ]
        read_only_fields = fields

    def get_points(self, obj):
        return PointService.get_balance(obj)


class UserRegistrationSerializer(serializers.Serializer):
    """
    Serializer for self-registration.
    Used for: POST /api/auth/register/
    """
    role = serializers.ChoiceField(choices=REGISTRATION_ROLES)
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField(validators=[validate_email_unique])
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password_strength],
        help_text="At least 8 characters with a letter and a number"
    )
    password_confirmation = serializers.CharField(write_only=True)
    phone = serializers.CharField(required=False, allow_blank=True, validators=[validate_phone])
    student_id = serializers.CharField(
        max_length=50, required=False, allow_blank=True, validators=[validate_student_id_unique]
    )
    id_number = serializers.CharField(max_length=50, required=False, allow_blank=True)
    class_id = serializers.PrimaryKeyRelatedField(
        queryset=SchoolClass.objects.all(), required=False, allow_null=True, source='school_class'
    )
    teaching_classes = serializers.PrimaryKeyRelatedField(
        queryset=SchoolClass.objects.all(), many=True, required=False
    )

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirmation']:
            raise serializers.ValidationError({'password_confirmation': "Passwords don't match"})
        if attrs['role'] == 'student' and not attrs.get('student_id'):
            raise serializers.ValidationError({'student_id': 'Student ID is required for students'})
        return attrs

    def create(self, validated_data):
        validated_data.pop('password_confirmation')
        return RegistrationService.register(**validated_data)


class AdminUserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for admin user update, including role sync.
    Used for: PUT/PATCH /api/admin/users/{id}/
    """
    roles = serializers.SlugRelatedField(
        many=True, slug_field='slug', queryset=Role.objects.all(), required=False
    )
    school_class = serializers.PrimaryKeyRelatedField(
        queryset=SchoolClass.objects.all(), required=False, allow_null=True
    )
    grade = serializers.PrimaryKeyRelatedField(queryset=Grade.objects.all(), required=False, allow_null=True)
    email = serializers.EmailField(required=False, allow_null=True, allow_blank=True)
    phone = serializers.CharField(required=False, allow_null=True, allow_blank=True, validators=[validate_phone])
    student_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = User
        fields = [
            'name', 'nickname', 'email', 'phone', 'student_id', 'id_number', 'is_head_teacher',
            'student_union_department', 'school_class', 'grade', 'roles', 'is_active'
        ]

    def validate_email(self, value):
        return validate_email_unique(value, exclude_user=self.instance)

    def validate_student_id(self, value):
        return validate_student_id_unique(value, exclude_user=self.instance)

    def update(self, instance, validated_data):
        roles = validated_data.pop('roles', None)
        instance = super().update(instance, validated_data)
        if roles is not None:
            instance.sync_roles(roles)
        return instance


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)
