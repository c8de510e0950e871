"""
Admin views for parent binding review.
"""
from django.shortcuts import get_object_or_404
from rest_framework.decorators import api_view, permission_classes

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response, error_response, paginate_queryset
from ..models import ParentChild
from ..serializers import ParentBindingSerializer
from ..services import ParentService


@api_view(['GET'])
@permission_classes([IsSchoolAdmin])
def list_bindings(request):
    """Query param ``approved``: true or false"""
    bindings = ParentChild.objects.select_related('parent', 'child')

    approved = request.GET.get('approved')
    if approved is not None:
        bindings = bindings.filter(is_approved=approved.lower() in ('1', 'true', 'yes'))

    items, pagination = paginate_queryset(bindings, request)
    return success_response({
        'bindings': ParentBindingSerializer(items, many=True).data,
        'pagination': pagination,
    })


@api_view(['POST'])
@permission_classes([IsSchoolAdmin])
def approve_binding(request, pk):
    binding = get_object_or_404(ParentChild, pk=pk)
    try:
        ParentService.approve_binding(binding)
    except BusinessRuleError as e:
        return error_response(str(e))
    return success_response(ParentBindingSerializer(binding).data, 'Binding approved')
