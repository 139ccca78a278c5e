# clients/submission.py
"""
Candidate-side submission form.

Validates locally with the server's own rules before posting, so most
mistakes never leave the client. States: editing -> submitting -> submitted.
"""
import logging

from apps.interview_requests import validators

from .api import ApiError

logger = logging.getLogger(__name__)

JOB_TITLES = [
    'Frontend Developer',
    'Backend Developer',
    'Full Stack Developer',
    'DevOps Engineer',
    'Data Scientist',
    'Product Manager',
    'UX/UI Designer',
    'QA Engineer',
    'Mobile Developer',
    'Software Architect',
    'Other',
]

FIELDS = ('name', 'email', 'jobTitle')


class SubmissionForm:
    """
    Interview request form.

    Attributes:
        values: current field values keyed by wire name (name, email, jobTitle)
        errors: field -> message from the last validation or server response
        state: 'editing', 'submitting' or 'submitted'
        result: the created record once submitted
    """

    STATE_EDITING = 'editing'
    STATE_SUBMITTING = 'submitting'
    STATE_SUBMITTED = 'submitted'

    def __init__(self, client):
        self.client = client
        self.reset()

    def reset(self):
        """Clear the form for another submission."""
        self.values = {field: '' for field in FIELDS}
        self.errors = {}
        self.state = self.STATE_EDITING
        self.result = None

    def set_field(self, field, value):
        if field not in FIELDS:
            raise KeyError(field)
        self.values[field] = value
        # Typing into a field clears its error
        self.errors.pop(field, None)

    def validate(self):
        """
        Check every field; returns True when the form can be submitted.

        Fills self.errors with one message per failing field.
        """
        errors = {}
        name = self.values['name'].strip()
        email = self.values['email'].strip()
        job_title = self.values['jobTitle'].strip()

        if not self.values['name']:
            errors['name'] = 'Name is required'
        elif len(name) < validators.NAME_MIN_LENGTH:
            errors['name'] = 'Name must be at least 2 characters long'
        elif len(name) > validators.NAME_MAX_LENGTH:
            errors['name'] = 'Name cannot exceed 100 characters'

        if not self.values['email']:
            errors['email'] = 'Email is required'
        elif not validators.is_valid_email(email):
            errors['email'] = 'Please provide a valid email address'
        elif len(email) > validators.EMAIL_MAX_LENGTH:
            errors['email'] = 'Email cannot exceed 255 characters'

        if not self.values['jobTitle']:
            errors['jobTitle'] = 'Job title is required'
        elif len(job_title) < validators.JOB_TITLE_MIN_LENGTH:
            errors['jobTitle'] = 'Job title must be at least 2 characters long'
        elif len(job_title) > validators.JOB_TITLE_MAX_LENGTH:
            errors['jobTitle'] = 'Job title cannot exceed 200 characters'

        if any(validators.contains_suspicious_content(self.values[field]) for field in FIELDS):
            errors['general'] = 'Invalid content detected'

        self.errors = errors
        return not errors

    def submit(self):
        """
        Validate and post the form.

        Returns:
            dict: the created record

        Raises:
            ApiError: local validation failed or the server refused the request;
                      the form stays in 'editing' with its values intact
        """
        if self.state == self.STATE_SUBMITTED:
            raise ApiError('Request already submitted; reset the form to send another')

        if not self.validate():
            raise ApiError('Please fix the errors in the form', details=[
                {'field': field, 'message': message} for field, message in self.errors.items()
            ])

        self.state = self.STATE_SUBMITTING
        try:
            record = self.client.create(
                self.values['name'],
                self.values['email'],
                self.values['jobTitle'],
            )
        except ApiError as e:
            self.state = self.STATE_EDITING
            self.errors = {d['field']: d['message'] for d in e.details if 'field' in d}
            logger.warning(f"Submission refused: {e}")
            raise

        self.state = self.STATE_SUBMITTED
        self.result = record
        logger.info(f"Interview request submitted: {record.get('id')}")
        return record
