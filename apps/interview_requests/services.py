# apps/interview_requests/services.py
"""
Business logic services for interview request management.

Provides:
- Listing with the status filter
- Creation with the pending-duplicate rule
- Accept / reject transitions
- Hard delete
- Aggregate statistics
- Broadcast of every successful write to the recruiters group
"""
import logging
from datetime import timedelta

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone

from apps.common.exceptions import (
    DuplicateRequest,
    InvalidIdentifier,
    RequestNotFound,
    StateConflict,
)
from apps.notifications.services import BroadcastService

from .models import InterviewRequest
from .serializers import InterviewRequestSerializer
from .validators import is_valid_object_id

logger = logging.getLogger(__name__)

# Only these values narrow the listing; anything else lists everything
LIST_FILTER_STATUSES = (InterviewRequest.STATUS_PENDING, InterviewRequest.STATUS_ACCEPTED)

RECENT_WINDOW = timedelta(days=7)
POPULAR_JOB_TITLES_LIMIT = 5


class InterviewRequestService:
    """Service class for interview-request business logic."""

    @staticmethod
    def serialize(interview_request):
        return InterviewRequestSerializer(interview_request).data

    @staticmethod
    def list_requests(status=None):
        """
        Return all requests, newest first.

        Args:
            status: 'pending' or 'accepted' to filter; any other value is ignored
        """
        queryset = InterviewRequest.objects.all()
        if status in LIST_FILTER_STATUSES:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def get_request(request_id, for_update=False):
        """
        Fetch one request by id.

        Args:
            request_id: Record id
            for_update: lock the row (call inside transaction.atomic)

        Raises:
            InvalidIdentifier: id is not 24 hexadecimal characters (no lookup is made)
            RequestNotFound: no record with that id
        """
        if not is_valid_object_id(request_id):
            raise InvalidIdentifier()
        try:
            queryset = InterviewRequest.objects.all()
            if for_update:
                queryset = queryset.select_for_update()
            return queryset.get(pk=request_id.lower())
        except InterviewRequest.DoesNotExist:
            raise RequestNotFound()

    @staticmethod
    def create_request(name, email, job_title):
        """
        Create a pending request and announce it.

        Args:
            name: Candidate name
            email: Candidate email (lowercased before storage)
            job_title: Position applied for

        Returns:
            InterviewRequest instance

        Raises:
            DuplicateRequest: a pending request for this email and job title exists
        """
        if InterviewRequest.has_pending_request(email, job_title):
            raise DuplicateRequest()

        try:
            with transaction.atomic():
                interview_request = InterviewRequest.objects.create(
                    name=name,
                    email=email,
                    job_title=job_title,
                )
        except IntegrityError:
            # Lost the race with a concurrent create for the same pair
            raise DuplicateRequest()

        logger.info(
            f"Interview request created: {interview_request.id} "
            f"({interview_request.name} for {interview_request.job_title})"
        )

        BroadcastService.new_request(InterviewRequestService.serialize(interview_request))
        return interview_request

    @staticmethod
    def accept_request(request_id):
        """
        Accept a pending request.

        Raises:
            InvalidIdentifier, RequestNotFound
            StateConflict: already accepted, or rejected
        """
        if not is_valid_object_id(request_id):
            raise InvalidIdentifier()

        with transaction.atomic():
            # Lock the row so a concurrent accept or reject waits for this decision
            interview_request = InterviewRequestService.get_request(request_id, for_update=True)

            if interview_request.status == InterviewRequest.STATUS_ACCEPTED:
                raise StateConflict(
                    'This interview request has already been accepted',
                    error='Already Accepted',
                )

            try:
                interview_request.accept()
            except ValidationError:
                raise StateConflict('Only pending requests can be accepted')

        logger.info(
            f"Interview request accepted: {interview_request.id} "
            f"({interview_request.name} for {interview_request.job_title})"
        )

        BroadcastService.status_update(InterviewRequestService.serialize(interview_request))
        return interview_request

    @staticmethod
    def reject_request(request_id, reason=None):
        """
        Reject a pending request.

        Args:
            request_id: Record id
            reason: Optional rejection reason, stored when non-empty

        Raises:
            InvalidIdentifier, RequestNotFound
            StateConflict: request is not pending
        """
        if not is_valid_object_id(request_id):
            raise InvalidIdentifier()

        with transaction.atomic():
            interview_request = InterviewRequestService.get_request(request_id, for_update=True)

            if not interview_request.is_pending():
                raise StateConflict('Only pending requests can be rejected')

            try:
                interview_request.reject(reason=reason)
            except ValidationError:
                raise StateConflict('Only pending requests can be rejected')

        logger.info(
            f"Interview request rejected: {interview_request.id} "
            f"({interview_request.name} for {interview_request.job_title})"
        )

        BroadcastService.status_update(InterviewRequestService.serialize(interview_request))
        return interview_request

    @staticmethod
    def delete_request(request_id):
        """
        Hard-delete a request.

        Raises:
            InvalidIdentifier, RequestNotFound
        """
        if not is_valid_object_id(request_id):
            raise InvalidIdentifier()
        request_id = request_id.lower()

        deleted, _ = InterviewRequest.objects.filter(pk=request_id).delete()
        if not deleted:
            raise RequestNotFound()

        logger.info(f"Interview request deleted: {request_id}")

        BroadcastService.request_deleted(request_id)

    @staticmethod
    def get_stats(now=None):
        """
        Aggregate counts over all requests.

        Returns:
            dict: total, pending, accepted, rejected, recentRequests (last 7 days),
                  popularJobTitles (top 5 as [{jobTitle, count}])
        """
        now = now or timezone.now()

        by_status = dict(
            InterviewRequest.objects.values_list('status')
            .annotate(count=Count('id'))
            .order_by()
        )
        pending = by_status.get(InterviewRequest.STATUS_PENDING, 0)
        accepted = by_status.get(InterviewRequest.STATUS_ACCEPTED, 0)
        rejected = by_status.get(InterviewRequest.STATUS_REJECTED, 0)

        recent = InterviewRequest.objects.filter(created_at__gte=now - RECENT_WINDOW).count()

        popular = (
            InterviewRequest.objects.values('job_title')
            .annotate(count=Count('id'))
            .order_by('-count', 'job_title')[:POPULAR_JOB_TITLES_LIMIT]
        )

        return {
            'total': pending + accepted + rejected,
            'pending': pending,
            'accepted': accepted,
            'rejected': rejected,
            'recentRequests': recent,
            'popularJobTitles': [
                {'jobTitle': row['job_title'], 'count': row['count']}
                for row in popular
            ],
        }
