# apps/common/exceptions.py
"""
API error taxonomy.

Every error raised by a handler is one of these (or a stock DRF exception)
and is rendered by apps.common.utils.custom_exception_handler as:

    {"success": false, "error": <title>, "message": <text>, "details"?: [...]}

Kinds:
- Validation errors (malformed/missing input) - 400
- State-conflict errors (operation illegal for current status) - 400
- Not-found errors (unknown identifier) - 404
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class BoardAPIError(APIException):
    """Base class: carries a short error title next to the human message."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_error = 'Bad Request'
    default_detail = 'The request could not be processed.'
    default_code = 'bad_request'

    def __init__(self, message=None, error=None, details=None):
        super().__init__(detail=message)
        self.error = error or self.default_error
        self.details = details


class RequestValidationError(BoardAPIError):
    default_error = 'Validation Error'
    default_detail = 'Please fix the following validation errors'
    default_code = 'validation_error'


class InvalidIdentifier(BoardAPIError):
    default_error = 'Invalid ID'
    default_detail = 'Invalid interview request ID format'
    default_code = 'invalid_id'


class InvalidQueryParameter(BoardAPIError):
    default_error = 'Invalid Query Parameter'
    default_detail = 'Invalid query parameter'
    default_code = 'invalid_query_parameter'


class DuplicateRequest(BoardAPIError):
    default_error = 'Duplicate Request'
    default_detail = (
        'You have already submitted a request for this position. '
        'Please wait for a response.'
    )
    default_code = 'duplicate_request'


class StateConflict(BoardAPIError):
    """Operation is not legal for the record's current status."""

    default_error = 'Invalid Status'
    default_detail = 'This operation is not allowed for the current status'
    default_code = 'state_conflict'


class RequestNotFound(BoardAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_error = 'Not Found'
    default_detail = 'Interview request not found'
    default_code = 'not_found'
