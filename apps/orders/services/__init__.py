"""
Order services module.

All services are exported from this module to maintain backward compatibility.
"""
from .verification_code_service import VerificationCodeService
from .exchange_service import ExchangeService
from .order_service import OrderService

__all__ = [
    'VerificationCodeService',
    'ExchangeService',
    'OrderService',
]
