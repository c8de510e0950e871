"""
Admin order management views.
"""
from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework.views import APIView

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response, error_response, paginate_queryset
from ..models import Order
from ..serializers import AdminOrderSerializer, OrderStatusUpdateSerializer, OrderVerifySerializer
from ..services import OrderService


class AdminOrderListView(APIView):
    """GET /api/admin/orders/?status=&search="""
    permission_classes = [IsSchoolAdmin]

    def get(self, request):
        orders = Order.objects.select_related('product', 'user', 'verified_by')

        order_status = request.GET.get('status')
        if order_status:
            orders = orders.filter(status=order_status)

        search = request.GET.get('search', '').strip()
        if search:
            orders = orders.filter(
                Q(order_no__icontains=search) |
                Q(user__name__icontains=search) |
                Q(user__student_id__icontains=search)
            )

        items, pagination = paginate_queryset(orders, request)
        return success_response({
            'orders': AdminOrderSerializer(items, many=True).data,
            'pagination': pagination,
        })


class AdminOrderDetailView(APIView):
    """GET /api/admin/orders/{id}/ - Order with status history and pickup code"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request, pk):
        order = get_object_or_404(Order.objects.select_related('product', 'user', 'verified_by'), pk=pk)
        payload = AdminOrderSerializer(order).data
        payload.update(OrderService.get_verification_info(order))
        return success_response(payload)


class AdminOrderStatusView(APIView):
    """POST /api/admin/orders/{id}/status/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request, pk):
        order = get_object_or_404(Order, pk=pk)
        serializer = OrderStatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid status update', serializer.errors)

        try:
            order = OrderService.change_status(
                order, serializer.validated_data['status'], serializer.validated_data['note'], request.user
            )
        except BusinessRuleError as e:
            return error_response(str(e))

        return success_response(AdminOrderSerializer(order).data, 'Order status updated')


class AdminOrderVerifyView(APIView):
    """POST /api/admin/orders/{id}/verify/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request, pk):
        order = get_object_or_404(Order, pk=pk)
        serializer = OrderVerifySerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid verification request', serializer.errors)

        data = dict(serializer.validated_data)
        method = data.pop('method')
        try:
            order = OrderService.verify_order(order, method, request.user, data)
        except BusinessRuleError as e:
            return error_response(str(e))

        return success_response(AdminOrderSerializer(order).data, 'Order verified')


class AdminOrderStatisticsView(APIView):
    """GET /api/admin/orders/statistics/"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request):
        return success_response(OrderService.get_statistics())
