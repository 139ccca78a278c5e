"""
Django admin configuration for interview requests.
"""
from django.contrib import admin
from .models import InterviewRequest


@admin.register(InterviewRequest)
class InterviewRequestAdmin(admin.ModelAdmin):
    """Admin configuration for InterviewRequest model."""

    list_display = [
        'id',
        'name',
        'email',
        'job_title',
        'status',
        'created_at',
    ]
    list_filter = [
        'status',
        'created_at',
    ]
    search_fields = [
        'name',
        'email',
        'job_title',
    ]
    readonly_fields = [
        'id',
        'created_at',
        'updated_at',
        'accepted_at',
        'rejected_at',
    ]
    ordering = ['-created_at']
