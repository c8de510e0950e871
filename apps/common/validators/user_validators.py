"""
User-related validators for phone, email, student id and password validation.
"""
import re
from rest_framework import serializers
from django.contrib.auth import get_user_model


def validate_phone(value):
    """
    Validate phone number format.

    Args:
        value: Phone number string

    Raises:
        serializers.ValidationError: If phone format is invalid

    Returns:
        str: Validated phone number
    """
    if not value:
        return value

    # Chinese phone number pattern: 11 digits starting with 1
    phone_pattern = re.compile(r'^1[3-9]\d{9}$')

    if not phone_pattern.match(value):
        raise serializers.ValidationError("Invalid phone number format. Expected: 11 digits starting with 1.")

    return value


def validate_email_unique(value, exclude_user=None):
    """
    Validate email uniqueness.

    Args:
        value: Email string
        exclude_user: User instance to exclude from uniqueness check (for updates)

    Raises:
        serializers.ValidationError: If email already exists

    Returns:
        str: Validated email
    """
    if not value:
        return value

    queryset = get_user_model().objects.filter(email__iexact=value)
    if exclude_user:
        queryset = queryset.exclude(pk=exclude_user.pk)

    if queryset.exists():
        raise serializers.ValidationError("Email already registered.")

    return value


def validate_student_id_unique(value, exclude_user=None):
    """Reject a student id that another user already holds."""
    if not value:
        return value

    queryset = get_user_model().objects.filter(student_id=value)
    if exclude_user:
        queryset = queryset.exclude(pk=exclude_user.pk)

    if queryset.exists():
        raise serializers.ValidationError("Student ID already registered.")

    return value


def validate_password_strength(value):
    """
    Validate password strength.

    Requirements:
    - Minimum 8 characters
    - At least one letter and one number

    Args:
        value: Password string

    Raises:
        serializers.ValidationError: If password doesn't meet strength requirements

    Returns:
        str: Validated password
    """
    if not value:
        raise serializers.ValidationError("Password cannot be empty.")

    if len(value) < 8:
        raise serializers.ValidationError("Password must be at least 8 characters long.")

    if not re.search(r'[a-zA-Z]', value) or not re.search(r'\d', value):
        raise serializers.ValidationError("Password must contain at least one letter and one number.")

    return value
