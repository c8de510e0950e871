"""
Custom exception handlers and business exceptions for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class BusinessRuleError(ValueError):
    """A request that is well formed but breaks a business rule."""
    default_message = 'Business rule violated'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InsufficientPointsError(BusinessRuleError):
    default_message = 'Insufficient redeemable points'


class OutOfStockError(BusinessRuleError):
    default_message = 'Product out of stock'


class ProductUnavailableError(BusinessRuleError):
    default_message = 'Product is not available'


class InvalidStatusTransition(BusinessRuleError):
    default_message = 'Invalid order status transition'


class VerificationError(BusinessRuleError):
    default_message = 'Verification failed'


class ReviewNotAllowedError(BusinessRuleError):
    default_message = 'You are not allowed to review this registration'


class PluginError(BusinessRuleError):
    default_message = 'Plugin operation failed'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, BusinessRuleError):
        logger.warning(f"Business rule violation: {exc}")
        return Response({
            'code': status.HTTP_400_BAD_REQUEST,
            'msg': str(exc),
        }, status=status.HTTP_400_BAD_REQUEST)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        if response.status_code >= 500:
            logger.error(f"API Exception: {exc}", exc_info=True)
        else:
            logger.info(f"API Exception: {exc}")

        # Create custom error response format
        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code >= 500:
            custom_response_data['msg'] = 'Internal server error'
            custom_response_data['errors'] = {'detail': 'Internal server error'}

        response.data = custom_response_data

    return response
