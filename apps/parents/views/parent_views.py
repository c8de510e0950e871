"""
Parent views: bind children and follow their points and orders.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsParent
from apps.common.utils import success_response, error_response, paginate_queryset
from apps.orders.serializers import OrderListSerializer
from apps.orders.services import OrderService
from apps.points.models import PointTransaction
from apps.points.serializers import PointTransactionSerializer
from ..serializers import BindChildSerializer, ParentChildSerializer
from ..services import ParentService


def child_not_found():
    return error_response(
        'Child not found or binding not approved', status_code=status.HTTP_404_NOT_FOUND
    )


@api_view(['POST'])
@permission_classes([IsParent])
def bind_child(request):
    serializer = BindChildSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid binding request', serializer.errors)

    try:
        binding = ParentService.bind_child(
            request.user,
            serializer.validated_data['student_id'],
            serializer.validated_data['relationship'],
        )
    except BusinessRuleError as e:
        return error_response(str(e))

    message = 'Child bound successfully' if binding.is_approved else 'Binding submitted, waiting for approval'
    return success_response(ParentChildSerializer(binding).data, message, status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsParent])
def list_children(request):
    bindings = ParentService.get_children(request.user)
    return success_response(ParentChildSerializer(bindings, many=True).data)


@api_view(['DELETE'])
@permission_classes([IsParent])
def unbind_child(request, child_id):
    if not ParentService.unbind_child(request.user, child_id):
        return error_response('Binding not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(None, 'Child unbound successfully')


@api_view(['GET'])
@permission_classes([IsParent])
def child_points(request, child_id):
    child = ParentService.get_approved_child(request.user, child_id)
    if child is None:
        return child_not_found()
    return success_response(ParentService.child_points(child))


@api_view(['GET'])
@permission_classes([IsParent])
def child_ranking(request, child_id):
    child = ParentService.get_approved_child(request.user, child_id)
    if child is None:
        return child_not_found()
    return success_response(ParentService.child_ranking(child))


@api_view(['GET'])
@permission_classes([IsParent])
def child_transactions(request, child_id):
    child = ParentService.get_approved_child(request.user, child_id)
    if child is None:
        return child_not_found()

    transactions = PointTransaction.objects.filter(user=child).select_related('operator')
    transaction_type = request.GET.get('type')
    if transaction_type:
        transactions = transactions.filter(type=transaction_type)

    items, pagination = paginate_queryset(transactions, request)
    return success_response({
        'transactions': PointTransactionSerializer(items, many=True).data,
        'pagination': pagination,
    })


@api_view(['GET'])
@permission_classes([IsParent])
def child_orders(request, child_id):
    child = ParentService.get_approved_child(request.user, child_id)
    if child is None:
        return child_not_found()

    orders = OrderService.get_user_orders(child, request.GET.get('status'))
    items, pagination = paginate_queryset(orders, request)
    return success_response({
        'orders': OrderListSerializer(items, many=True).data,
        'pagination': pagination,
    })
