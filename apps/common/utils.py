# apps/common/utils.py
from django.http import JsonResponse
from django.conf import settings
from http import HTTPStatus
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import exceptions
from rest_framework import status as http_status
import logging

from .exceptions import BoardAPIError

logger = logging.getLogger(__name__)


def _error_title(status_code):
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return 'Request failed'


def custom_exception_handler(exc, context):
    """
    Custom exception handler for Django REST Framework.

    Renders every error in the API envelope:
        {"success": false, "error": <title>, "message": <text>, "details"?: ...}

    Args:
        exc: The exception raised
        context: Context dict with 'view' and 'request'

    Returns:
        Response: JSON response with error details
    """
    # Call REST framework's default handler first to get the standard error response
    response = exception_handler(exc, context)

    if response is not None:
        body = {'success': False}

        if isinstance(exc, BoardAPIError):
            body['error'] = exc.error
            body['message'] = str(exc.detail)
            if exc.details is not None:
                body['details'] = exc.details
        elif isinstance(exc, exceptions.Throttled):
            body['error'] = 'Too Many Requests'
            body['message'] = 'Too many requests from this IP, please try again later.'
        elif isinstance(exc, exceptions.ValidationError):
            body['error'] = 'Validation Error'
            body['message'] = 'Please fix the following validation errors'
            body['details'] = response.data
        elif isinstance(response.data, dict) and 'detail' in response.data:
            body['error'] = _error_title(response.status_code)
            body['message'] = str(response.data['detail'])
        else:
            body['error'] = _error_title(response.status_code)
            body['message'] = str(response.data)

        response.data = body
        return response

    # Handle unhandled exceptions (500 errors)
    # These are exceptions that DRF didn't catch
    logger.exception(f"Unhandled exception in {context.get('view', 'unknown view')}: {exc}")

    error_response = {
        'success': False,
        'error': 'Internal Server Error',
    }

    # Include the underlying failure only in DEBUG mode
    if settings.DEBUG:
        error_response['message'] = str(exc)
    else:
        error_response['message'] = 'Something went wrong'

    return Response(error_response, status=http_status.HTTP_500_INTERNAL_SERVER_ERROR)


def custom_404(request, exception=None):
    """
    Custom 404 error handler that returns JSON.
    """
    return JsonResponse({
        'error': 'Route not found',
        'message': f'Cannot {request.method} {request.path}'
    }, status=404)


def custom_500(request):
    """
    Custom 500 error handler that returns JSON.
    """
    return JsonResponse({
        'success': False,
        'error': 'Internal Server Error',
        'message': 'Something went wrong'
    }, status=500)
