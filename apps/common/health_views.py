"""
Health check view for monitoring tools.
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """
    Returns HTTP 200 with database connectivity, 503 when the database is unreachable.
    No authentication required.
    """

    def get(self, request):
        health_response = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
        }

        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
            health_response['database'] = {'status': 'healthy'}
        except DatabaseError as e:
            logger.error(f"Database health check failed: {e}")
            health_response['status'] = 'unhealthy'
            health_response['database'] = {'status': 'unhealthy', 'message': str(e)}

        status_code = 200 if health_response['status'] == 'healthy' else 503
        return JsonResponse(health_response, status=status_code)
