import re

import apps.interview_requests.models
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='InterviewRequest',
            fields=[
                ('id', models.CharField(default=apps.interview_requests.models.generate_object_id, editable=False, help_text='24-character hexadecimal identifier', max_length=24, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Candidate name', max_length=100, validators=[django.core.validators.MinLengthValidator(2)])),
                ('email', models.CharField(help_text='Candidate email, stored lowercased', max_length=255, validators=[django.core.validators.RegexValidator(re.compile('^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$'), 'Please provide a valid email address')])),
                ('job_title', models.CharField(help_text='Position the candidate applies for', max_length=200, validators=[django.core.validators.MinLengthValidator(2)])),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], db_index=True, default='pending', max_length=20)),
                ('rejection_reason', models.TextField(blank=True, help_text='Optional reason, set only on rejection', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('accepted_at', models.DateTimeField(blank=True, null=True)),
                ('rejected_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['email', 'job_title'], name='idx_request_email_job')],
                'constraints': [models.UniqueConstraint(condition=models.Q(('status', 'pending')), fields=('email', 'job_title'), name='uniq_pending_request_per_email_job')],
            },
        ),
    ]
