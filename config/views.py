# config/views.py
"""
Project-level views: health check and JSON error handlers.
"""
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone


# ============================================================================
# HEALTH
# ============================================================================

def health_check_view(request):
    """System health check endpoint."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        db_status = True
    except DatabaseError:
        db_status = False

    status_code = 200 if db_status else 503

    return JsonResponse({
        'status': 'healthy' if db_status else 'unhealthy',
        'database': 'connected' if db_status else 'disconnected',
        'timestamp': timezone.now().isoformat(),
    }, status=status_code)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

def handler404(request, exception):
    return JsonResponse({'error': 'Not found'}, status=404)


def handler500(request):
    return JsonResponse({'error': 'Internal server error'}, status=500)


def handler403(request, exception):
    return JsonResponse({'error': 'Insufficient permissions'}, status=403)


def handler400(request, exception):
    return JsonResponse({'error': 'Bad request'}, status=400)
