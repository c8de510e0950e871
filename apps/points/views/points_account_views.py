"""
Points balance and ledger views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, paginate_queryset
from ..models import PointTransaction
from ..serializers import PointTransactionSerializer
from ..services import PointService, RankingService


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_overview(request):
    """Balance with overall and redeemable rank"""
    data = PointService.get_balance(request.user)
    data.update(RankingService.get_user_ranks(request.user))
    return success_response(data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_history(request):
    """Paginated ledger, filterable by type and source"""
    transactions = PointTransaction.objects.filter(user=request.user).select_related('operator')

    transaction_type = request.GET.get('type')
    if transaction_type:
        transactions = transactions.filter(type=transaction_type)

    source = request.GET.get('source')
    if source:
        transactions = transactions.filter(source__icontains=source)

    items, pagination = paginate_queryset(transactions, request)
    return success_response({
        'transactions': PointTransactionSerializer(items, many=True).data,
        'pagination': pagination,
    })
