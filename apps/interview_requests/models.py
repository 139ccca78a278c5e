# apps/interview_requests/models.py
"""
Interview request model.

Models:
- InterviewRequest: a candidate's request for an interview, reviewed by recruiters

Identifiers:
- 24-character hexadecimal primary key (creation timestamp + random + counter)
- Shape is checked before any lookup, so a malformed id never reaches the database
"""
import itertools
import os
import secrets
import threading
import time

from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from . import validators

_counter_lock = threading.Lock()
_counter = itertools.count(secrets.randbelow(0xFFFFFF))
_process_token = os.urandom(5)


def generate_object_id():
    """
    Build a new 24-hex-character identifier.

    Layout: 4-byte big-endian seconds, 5 bytes of per-process randomness,
    3-byte rolling counter. Ids from one process sort by creation second.
    """
    with _counter_lock:
        count = next(_counter) & 0xFFFFFF
    raw = int(time.time()).to_bytes(4, 'big') + _process_token + count.to_bytes(3, 'big')
    return raw.hex()


class InterviewRequest(models.Model):
    """
    Interview request with a closed three-state lifecycle.

    Lifecycle:
        pending -> accepted
        pending -> rejected

    Rules:
        - accepted and rejected are terminal
        - At most one pending request per (email, job_title)
        - Deletion is a hard delete
    """

    STATUS_PENDING = 'pending'
    STATUS_ACCEPTED = 'accepted'
    STATUS_REJECTED = 'rejected'

    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
    )

    # ========== STATE MACHINE ==========
    # Format: {from_status: [allowed_to_statuses]}
    VALID_TRANSITIONS = {
        STATUS_PENDING: [STATUS_ACCEPTED, STATUS_REJECTED],
        # Terminal states - no transitions allowed
        STATUS_ACCEPTED: [],
        STATUS_REJECTED: [],
    }

    id = models.CharField(
        primary_key=True,
        max_length=24,
        default=generate_object_id,
        editable=False,
        help_text='24-character hexadecimal identifier'
    )

    name = models.CharField(
        max_length=validators.NAME_MAX_LENGTH,
        validators=[MinLengthValidator(validators.NAME_MIN_LENGTH)],
        help_text='Candidate name'
    )

    email = models.CharField(
        max_length=validators.EMAIL_MAX_LENGTH,
        validators=[RegexValidator(validators.EMAIL_REGEX, 'Please provide a valid email address')],
        help_text='Candidate email, stored lowercased'
    )

    job_title = models.CharField(
        max_length=validators.JOB_TITLE_MAX_LENGTH,
        validators=[MinLengthValidator(validators.JOB_TITLE_MIN_LENGTH)],
        help_text='Position the candidate applies for'
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
        db_index=True
    )

    rejection_reason = models.TextField(
        null=True,
        blank=True,
        help_text='Optional reason, set only on rejection'
    )

    # Audit timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)
    accepted_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['email', 'job_title'], name='idx_request_email_job'),
        ]
        constraints = [
            # Closes the race between the duplicate check and the insert
            models.UniqueConstraint(
                fields=['email', 'job_title'],
                condition=Q(status='pending'),
                name='uniq_pending_request_per_email_job',
            ),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> - {self.job_title} ({self.status})"

    def normalize(self):
        """Trim free text and lowercase the email."""
        self.name = (self.name or '').strip()
        self.email = (self.email or '').strip().lower()
        self.job_title = (self.job_title or '').strip()

    def save(self, *args, **kwargs):
        self.normalize()
        # Pending-duplicate constraint is enforced by the database on insert
        self.full_clean(validate_constraints=False)
        super().save(*args, **kwargs)

    def _validate_transition(self, new_status):
        """
        Validate if a status transition is allowed.

        Raises:
            ValidationError: If transition is not allowed
        """
        allowed = self.VALID_TRANSITIONS.get(self.status, [])
        if new_status not in allowed:
            raise ValidationError(
                f"Invalid status transition: '{self.status}' → '{new_status}'. "
                f"Allowed transitions from '{self.status}': {allowed or 'none (terminal state)'}"
            )
        return True

    # ========== STATUS TRANSITION METHODS ==========

    def _apply_transition(self, new_status, **fields):
        """
        Write a validated transition only if the stored status still matches.

        The UPDATE is conditioned on the status this instance was checked
        against, so a stale copy cannot overwrite a decision made elsewhere.

        Raises:
            ValidationError: the stored status changed since this instance was loaded
        """
        self._validate_transition(new_status)

        fields['status'] = new_status
        fields['updated_at'] = timezone.now()
        updated = type(self).objects.filter(pk=self.pk, status=self.status).update(**fields)
        if not updated:
            current = type(self).objects.filter(pk=self.pk).values_list('status', flat=True).first()
            raise ValidationError(
                f"Invalid status transition: '{self.status}' → '{new_status}'. "
                f"Stored status is now '{current}'"
            )

        for name, value in fields.items():
            setattr(self, name, value)
        return self

    def accept(self):
        """Accept a pending request."""
        return self._apply_transition(self.STATUS_ACCEPTED, accepted_at=timezone.now())

    def reject(self, reason=None):
        """Reject a pending request, optionally recording why."""
        fields = {'rejected_at': timezone.now()}
        if reason:
            fields['rejection_reason'] = reason
        return self._apply_transition(self.STATUS_REJECTED, **fields)

    # ========== QUERY HELPERS ==========

    def is_pending(self):
        return self.status == self.STATUS_PENDING

    @classmethod
    def has_pending_request(cls, email, job_title):
        """Check if a pending request already exists for this email and job title."""
        return cls.objects.filter(
            email=email.strip().lower(),
            job_title=job_title.strip(),
            status=cls.STATUS_PENDING,
        ).exists()
