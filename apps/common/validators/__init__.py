"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .user_validators import (
    validate_phone, validate_email_unique, validate_student_id_unique,
    validate_password_strength
)
from .points_validators import validate_points_amount

__all__ = [
    'validate_phone',
    'validate_email_unique',
    'validate_student_id_unique',
    'validate_password_strength',
    'validate_points_amount',
]
