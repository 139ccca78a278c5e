from django.apps import AppConfig


class InterviewRequestsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.interview_requests'
    verbose_name = 'Interview Requests'
