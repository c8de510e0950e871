"""
User services module.

All services are exported from this module to maintain backward compatibility.
"""
from .registration_service import RegistrationService
from .approval_service import ApprovalService
from .notification_service import NotificationService

__all__ = [
    'RegistrationService',
    'ApprovalService',
    'NotificationService',
]
