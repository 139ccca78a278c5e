# apps/interview_requests/serializers.py
"""
Serializers for the InterviewRequest model.

Includes:
- InterviewRequestSerializer: Full read serializer (camelCase wire format)
- InterviewRequestCreateSerializer: Create-path validation gate
- InterviewRequestRejectSerializer: Optional rejection reason
- InterviewRequestStatsSerializer: Aggregate counts (docs only)
"""
from rest_framework import serializers

from .models import InterviewRequest
from . import validators


class StrictCharField(serializers.CharField):
    """
    CharField that refuses non-string input instead of coercing numbers.

    Whitespace-only input fails with the field's 'whitespace' message, when
    it defines one, rather than 'blank'.
    """

    def run_validation(self, data=serializers.empty):
        if (
            isinstance(data, str)
            and data
            and not data.strip()
            and 'whitespace' in self.error_messages
        ):
            self.fail('whitespace')
        return super().run_validation(data)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class InterviewRequestSerializer(serializers.ModelSerializer):
    """Read serializer; this is the record shape used in responses and broadcasts."""

    jobTitle = serializers.CharField(source='job_title', read_only=True)
    rejectionReason = serializers.CharField(source='rejection_reason', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    acceptedAt = serializers.DateTimeField(source='accepted_at', read_only=True, allow_null=True)
    rejectedAt = serializers.DateTimeField(source='rejected_at', read_only=True, allow_null=True)

    class Meta:
        model = InterviewRequest
        fields = [
            'id',
            'name',
            'email',
            'jobTitle',
            'status',
            'rejectionReason',
            'createdAt',
            'updatedAt',
            'acceptedAt',
            'rejectedAt',
        ]
        read_only_fields = fields


class InterviewRequestCreateSerializer(serializers.Serializer):
    """
    Validation gate for the create path.

    Required fields:
    - name: 2-100 characters after trimming
    - email: local@domain.tld shape, at most 255 characters
    - jobTitle: 2-200 characters after trimming

    All three are also scanned for script/markup content; a hit is reported
    under the 'general' field. Produces at most one message per field.
    """

    name = StrictCharField(
        min_length=validators.NAME_MIN_LENGTH,
        max_length=validators.NAME_MAX_LENGTH,
        error_messages={
            'required': 'Name is required',
            'null': 'Name is required',
            'blank': 'Name is required',
            'invalid': 'Name must be a string',
            'min_length': 'Name must be at least 2 characters long',
            'whitespace': 'Name must be at least 2 characters long',
            'max_length': 'Name cannot exceed 100 characters',
        },
    )
    email = StrictCharField(
        error_messages={
            'required': 'Email is required',
            'null': 'Email is required',
            'blank': 'Email is required',
            'invalid': 'Email must be a string',
            'whitespace': 'Please provide a valid email address',
        },
    )
    jobTitle = StrictCharField(
        source='job_title',
        min_length=validators.JOB_TITLE_MIN_LENGTH,
        max_length=validators.JOB_TITLE_MAX_LENGTH,
        error_messages={
            'required': 'Job title is required',
            'null': 'Job title is required',
            'blank': 'Job title is required',
            'invalid': 'Job title must be a string',
            'min_length': 'Job title must be at least 2 characters long',
            'whitespace': 'Job title must be at least 2 characters long',
            'max_length': 'Job title cannot exceed 200 characters',
        },
    )

    SCANNED_FIELDS = ('name', 'email', 'jobTitle')

    def validate_email(self, value):
        if not validators.is_valid_email(value):
            raise serializers.ValidationError('Please provide a valid email address')
        if len(value) > validators.EMAIL_MAX_LENGTH:
            raise serializers.ValidationError('Email cannot exceed 255 characters')
        return value.lower()

    def to_internal_value(self, data):
        """Run field checks and the content scan together so both are reported."""
        errors = {}
        value = None
        try:
            value = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            errors.update(exc.detail)

        if hasattr(data, 'get') and any(
            validators.contains_suspicious_content(data.get(field))
            for field in self.SCANNED_FIELDS
        ):
            errors['general'] = ['Invalid content detected']

        if errors:
            raise serializers.ValidationError(errors)
        return value

    def error_details(self):
        """
        Flatten serializer errors to [{field, message}], one entry per field.

        Call after is_valid() returned False.
        """
        details = []
        errors = self.errors
        if not isinstance(errors, dict):
            return [{'field': 'general', 'message': str(errors)}]
        for field, messages in errors.items():
            if field == 'non_field_errors':
                field = 'general'
            message = messages[0] if isinstance(messages, list) and messages else messages
            details.append({'field': field, 'message': str(message)})
        return details


class InterviewRequestRejectSerializer(serializers.Serializer):
    """Optional free-text reason for a rejection."""

    reason = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=1000,
        help_text='Reason for rejection'
    )


class PopularJobTitleSerializer(serializers.Serializer):
    jobTitle = serializers.CharField()
    count = serializers.IntegerField()


class InterviewRequestStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    accepted = serializers.IntegerField()
    rejected = serializers.IntegerField()
    recentRequests = serializers.IntegerField()
    popularJobTitles = PopularJobTitleSerializer(many=True)
