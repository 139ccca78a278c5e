# apps/interview_requests/tests/test_models.py
"""
Unit tests for the InterviewRequest model.

Tests cover:
1. Identifier generation
2. Normalization on save
3. Status transitions and terminal states
4. The pending-duplicate database constraint
"""
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from apps.interview_requests.models import InterviewRequest, generate_object_id


class GenerateObjectIdTests(TestCase):

    def test_shape(self):
        value = generate_object_id()
        self.assertRegex(value, r'^[0-9a-f]{24}$')

    def test_unique(self):
        values = {generate_object_id() for _ in range(1000)}
        self.assertEqual(len(values), 1000)


class InterviewRequestModelTests(TestCase):

    def setUp(self):
        self.record = InterviewRequest.objects.create(
            name='  Jo Lee  ',
            email=' Jo@Example.com ',
            job_title=' Backend Developer ',
        )

    def test_defaults(self):
        self.assertEqual(self.record.status, InterviewRequest.STATUS_PENDING)
        self.assertIsNone(self.record.rejection_reason)
        self.assertIsNone(self.record.accepted_at)
        self.assertIsNone(self.record.rejected_at)
        self.assertIsNotNone(self.record.created_at)
        self.assertTrue(self.record.is_pending())

    def test_normalized_on_save(self):
        self.record.refresh_from_db()
        self.assertEqual(self.record.name, 'Jo Lee')
        self.assertEqual(self.record.email, 'jo@example.com')
        self.assertEqual(self.record.job_title, 'Backend Developer')

    def test_invalid_email_rejected_on_save(self):
        with self.assertRaises(ValidationError):
            InterviewRequest.objects.create(name='Jo Lee', email='nope', job_title='QA Engineer')

    def test_accept(self):
        self.record.accept()

        self.record.refresh_from_db()
        self.assertEqual(self.record.status, InterviewRequest.STATUS_ACCEPTED)
        self.assertIsNotNone(self.record.accepted_at)
        self.assertFalse(self.record.is_pending())

    def test_reject_with_reason(self):
        self.record.reject('No openings')

        self.record.refresh_from_db()
        self.assertEqual(self.record.status, InterviewRequest.STATUS_REJECTED)
        self.assertEqual(self.record.rejection_reason, 'No openings')
        self.assertIsNotNone(self.record.rejected_at)

    def test_reject_blank_reason_leaves_it_unset(self):
        self.record.reject('')
        self.record.refresh_from_db()
        self.assertIsNone(self.record.rejection_reason)

    def test_accepted_is_terminal(self):
        self.record.accept()
        with self.assertRaises(ValidationError):
            self.record.reject()
        with self.assertRaises(ValidationError):
            self.record.accept()

    def test_rejected_is_terminal(self):
        self.record.reject()
        with self.assertRaises(ValidationError):
            self.record.accept()

    def test_stale_copy_cannot_overwrite_decision(self):
        first = InterviewRequest.objects.get(pk=self.record.pk)
        second = InterviewRequest.objects.get(pk=self.record.pk)

        first.accept()
        with self.assertRaises(ValidationError):
            second.reject('late')

        self.record.refresh_from_db()
        self.assertEqual(self.record.status, InterviewRequest.STATUS_ACCEPTED)
        self.assertIsNotNone(self.record.accepted_at)
        self.assertIsNone(self.record.rejected_at)
        self.assertIsNone(self.record.rejection_reason)

    def test_transition_updates_instance(self):
        before = self.record.updated_at
        self.record.reject('Filled')

        self.assertEqual(self.record.status, InterviewRequest.STATUS_REJECTED)
        self.assertEqual(self.record.rejection_reason, 'Filled')
        self.assertGreaterEqual(self.record.updated_at, before)

    def test_has_pending_request(self):
        self.assertTrue(InterviewRequest.has_pending_request('JO@example.com', 'Backend Developer '))
        self.assertFalse(InterviewRequest.has_pending_request('jo@example.com', 'QA Engineer'))

        self.record.accept()
        self.assertFalse(InterviewRequest.has_pending_request('jo@example.com', 'Backend Developer'))

    def test_database_blocks_second_pending_pair(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                InterviewRequest.objects.create(
                    name='Jo Again', email='jo@example.com', job_title='Backend Developer'
                )

    def test_decided_pairs_may_repeat(self):
        self.record.reject()
        InterviewRequest.objects.create(name='Jo Lee', email='jo@example.com', job_title='Backend Developer')

        self.assertEqual(
            InterviewRequest.objects.filter(email='jo@example.com', job_title='Backend Developer').count(),
            2,
        )
