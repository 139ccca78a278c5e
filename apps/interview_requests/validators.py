# apps/interview_requests/validators.py
"""
Input checks shared by the API, the model and the Python clients.

Provides:
- Field limits and the email shape
- Suspicious-content scan (script tags, inline handlers, script URIs, eval/expression)
- sanitize_string() for stripping markup from free text
- Identifier shape check (24 hexadecimal characters)
- List query-parameter checks
"""
import re

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
JOB_TITLE_MIN_LENGTH = 2
JOB_TITLE_MAX_LENGTH = 200

EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
OBJECT_ID_REGEX = re.compile(r'^[0-9a-fA-F]{24}$')

SUSPICIOUS_PATTERNS = [
    re.compile(r'<script[^>]*>.*?</script>', re.IGNORECASE),
    re.compile(r'javascript:', re.IGNORECASE),
    re.compile(r'vbscript:', re.IGNORECASE),
    re.compile(r'onload=', re.IGNORECASE),
    re.compile(r'onerror=', re.IGNORECASE),
    re.compile(r'onclick=', re.IGNORECASE),
    re.compile(r'<iframe[^>]*>.*?</iframe>', re.IGNORECASE),
    re.compile(r'eval\s*\(', re.IGNORECASE),
    re.compile(r'expression\s*\(', re.IGNORECASE),
]

# Status values accepted by the list endpoint's query validator
QUERY_STATUSES = ('pending', 'accepted', 'rejected')
QUERY_LIMIT_MAX = 100


def is_valid_email(email):
    return bool(EMAIL_REGEX.match(email.lower()))


def is_valid_object_id(value):
    return isinstance(value, str) and bool(OBJECT_ID_REGEX.match(value))


def contains_suspicious_content(value):
    """True when a string carries markup or script that should never be stored."""
    if not isinstance(value, str):
        return False
    return any(pattern.search(value) for pattern in SUSPICIOUS_PATTERNS)


def sanitize_string(value):
    """
    Remove potentially harmful characters from free text.

    Drops angle brackets, javascript:/vbscript: prefixes and inline
    event-handler attributes, then trims.
    """
    if not isinstance(value, str):
        return ''
    value = re.sub(r'[<>]', '', value)
    value = re.sub(r'javascript:', '', value, flags=re.IGNORECASE)
    value = re.sub(r'vbscript:', '', value, flags=re.IGNORECASE)
    value = re.sub(r'on\w+\s*=', '', value, flags=re.IGNORECASE)
    return value.strip()


def _is_number(value):
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


def validate_list_query_params(params):
    """
    Check the list endpoint's query string.

    Args:
        params: mapping of query parameters (request.query_params)

    Returns:
        None when valid, otherwise the error message for the first violation.
    """
    status = params.get('status')
    limit = params.get('limit')
    page = params.get('page')

    if status and status not in QUERY_STATUSES:
        return 'Status must be one of: pending, accepted, rejected'

    if limit and (not _is_number(limit) or not 1 <= float(limit) <= QUERY_LIMIT_MAX):
        return 'Limit must be a number between 1 and 100'

    if page and (not _is_number(page) or float(page) < 1):
        return 'Page must be a positive number'

    return None
