"""
Common utility functions for API responses
"""
from django.conf import settings
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response format
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Standard error response format
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def parse_int(value, default, minimum=None, maximum=None):
    """Parse a query parameter as int, clamped to the given bounds."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = default
    if minimum is not None and number < minimum:
        number = minimum
    if maximum is not None and number > maximum:
        number = maximum
    return number


def query_id(request, name):
    """
    Read an optional integer id from the query string.

    Raises:
        ValidationError: If the value is present but not an integer
    """
    value = request.query_params.get(name, '').strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError({name: 'A valid integer is required.'})


def paginate_queryset(queryset, request, default_page_size=20, max_page_size=100):
    """
    Slice a queryset by the ``page`` and ``per_page`` query parameters.

    Returns:
        tuple: (page_items, pagination_dict)
    """
    page = parse_int(request.GET.get('page'), 1, minimum=1)
    per_page = parse_int(
        request.GET.get('per_page'), default_page_size, minimum=1, maximum=max_page_size
    )

    total = queryset.count()
    start = (page - 1) * per_page
    items = queryset[start:start + per_page]

    return items, {
        'page': page,
        'per_page': per_page,
        'total': total,
        'total_pages': (total + per_page - 1) // per_page,
    }


def paginated_response(queryset, serializer_class, request, message="Success", context=None):
    """
    Standard paginated response format
    """
    items, pagination = paginate_queryset(queryset, request)
    serializer = serializer_class(items, many=True, context=context or {'request': request})
    return success_response({
        "list": serializer.data,
        "pagination": pagination,
    }, message)


def ranking_limit(value):
    """Clamp a requested leaderboard size to the configured bounds."""
    return parse_int(
        value, settings.RANKING_DEFAULT_LIMIT, minimum=1, maximum=settings.RANKING_MAX_LIMIT
    )
