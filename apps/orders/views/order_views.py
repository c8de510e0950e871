"""
Shop order views: exchange, my orders and pickup codes.
"""
import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsApprovedUser
from apps.common.utils import success_response, error_response, paginate_queryset
from ..serializers import ExchangeSerializer, OrderListSerializer, OrderDetailSerializer
from ..services import ExchangeService, OrderService

logger = logging.getLogger(__name__)


class OrderListCreateView(APIView):
    """
    GET /api/shop/orders/?status= - My orders
    POST /api/shop/orders/ - Exchange points for a product
    """
    permission_classes = [IsAuthenticated, IsApprovedUser]

    def get(self, request):
        orders = OrderService.get_user_orders(request.user, request.GET.get('status'))
        items, pagination = paginate_queryset(orders, request)
        return success_response({
            'orders': OrderListSerializer(items, many=True).data,
            'pagination': pagination,
        })

    def post(self, request):
        serializer = ExchangeSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid exchange request', serializer.errors)

        data = serializer.validated_data
        try:
            order = ExchangeService.exchange(request.user, data['product'], data.get('shipping_info'))
        except BusinessRuleError as e:
            return error_response(str(e))

        payload = OrderDetailSerializer(order).data
        payload.update(OrderService.get_verification_info(order))
        return success_response(payload, 'Exchange successful', status.HTTP_201_CREATED)


class OrderDetailView(APIView):
    """GET /api/shop/orders/{id}/ - Order detail with pickup code"""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        order = OrderService.get_user_order(request.user, pk)
        if order is None:
            return error_response('Order not found', status_code=status.HTTP_404_NOT_FOUND)

        payload = OrderDetailSerializer(order).data
        payload.update(OrderService.get_verification_info(order))
        return success_response(payload)


class RegenerateVerificationCodeView(APIView):
    """POST /api/shop/orders/{id}/regenerate-code/"""
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        order = OrderService.get_user_order(request.user, pk)
        if order is None:
            return error_response('Order not found', status_code=status.HTTP_404_NOT_FOUND)

        try:
            OrderService.regenerate_verification_code(order)
        except BusinessRuleError as e:
            return error_response(str(e))

        return success_response(OrderService.get_verification_info(order), 'Verification code regenerated')
