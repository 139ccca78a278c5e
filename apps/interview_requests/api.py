# apps/interview_requests/api.py
"""
Interview Request API endpoints.

Endpoints:
1) GET    /api/interview-requests/            - List requests (?status=pending|accepted)
2) POST   /api/interview-requests/            - Create request
3) GET    /api/interview-requests/stats/      - Aggregate counts
4) GET    /api/interview-requests/{id}/       - Get request details
5) PUT    /api/interview-requests/{id}/accept/ - Accept request
6) PUT    /api/interview-requests/{id}/reject/ - Reject request
7) DELETE /api/interview-requests/{id}/       - Delete request

Status Flow:
- pending → accepted | rejected
- Terminal states: accepted, rejected

Every write broadcasts one event to the recruiters group after it succeeds.
No authentication: any client may call any endpoint.
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from apps.common.exceptions import InvalidQueryParameter, RequestValidationError

from .serializers import (
    InterviewRequestSerializer,
    InterviewRequestCreateSerializer,
    InterviewRequestRejectSerializer,
    InterviewRequestStatsSerializer,
)
from .services import InterviewRequestService
from .validators import validate_list_query_params

logger = logging.getLogger(__name__)

ID_RESPONSES = {
    400: "Invalid ID format or invalid status transition",
    404: "Interview request not found",
}


class InterviewRequestListCreateAPI(APIView):
    """
    List or create interview requests.

    GET /api/interview-requests/

    Query Parameters:
    - status: 'pending' | 'accepted' narrows the list (default: all)
    - limit, page: validated only; the list is not paginated

    POST /api/interview-requests/

    Request Body:
    - name: Candidate name (2-100 characters)
    - email: Candidate email
    - jobTitle: Position (2-200 characters)
    """

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="List Interview Requests",
        operation_description="Get all interview requests, newest first.",
        manual_parameters=[
            openapi.Parameter(
                "status",
                openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=["pending", "accepted", "rejected"],
                description="Filter by status (only pending and accepted narrow the list)",
            ),
            openapi.Parameter(
                "limit",
                openapi.IN_QUERY,
                type=openapi.TYPE_INTEGER,
                description="Validated (1-100), not applied",
            ),
            openapi.Parameter(
                "page",
                openapi.IN_QUERY,
                type=openapi.TYPE_INTEGER,
                description="Validated (>= 1), not applied",
            ),
        ],
        responses={
            200: InterviewRequestSerializer(many=True),
            400: "Invalid query parameter",
        },
    )
    def get(self, request):
        error = validate_list_query_params(request.query_params)
        if error:
            raise InvalidQueryParameter(error)

        queryset = InterviewRequestService.list_requests(
            status=request.query_params.get("status")
        )
        data = InterviewRequestSerializer(queryset, many=True).data

        return Response({
            "success": True,
            "data": data,
            "count": len(data),
        })

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Create Interview Request",
        operation_description=(
            "Submit a new interview request. Fails if a pending request already "
            "exists for the same email and job title."
        ),
        request_body=InterviewRequestCreateSerializer,
        responses={
            201: InterviewRequestSerializer,
            400: "Validation error or duplicate pending request",
        },
    )
    def post(self, request):
        serializer = InterviewRequestCreateSerializer(data=request.data)
        if not serializer.is_valid():
            raise RequestValidationError(details=serializer.error_details())

        interview_request = InterviewRequestService.create_request(
            name=serializer.validated_data["name"],
            email=serializer.validated_data["email"],
            job_title=serializer.validated_data["job_title"],
        )

        return Response(
            {
                "success": True,
                "message": "Interview request submitted successfully",
                "data": InterviewRequestSerializer(interview_request).data,
            },
            status=status.HTTP_201_CREATED,
        )


class InterviewRequestStatsAPI(APIView):
    """
    Aggregate counts.

    GET /api/interview-requests/stats/

    Returns total/pending/accepted/rejected counts, requests created in the
    last 7 days and the 5 most requested job titles.
    """

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Interview Request Statistics",
        responses={200: InterviewRequestStatsSerializer},
    )
    def get(self, request):
        return Response({
            "success": True,
            "data": InterviewRequestService.get_stats(),
        })


class InterviewRequestDetailAPI(APIView):
    """
    Get or delete an interview request.

    GET    /api/interview-requests/{id}/
    DELETE /api/interview-requests/{id}/

    The id must be 24 hexadecimal characters; anything else is a 400, not a 404.
    """

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Get Interview Request",
        responses={200: InterviewRequestSerializer, **ID_RESPONSES},
    )
    def get(self, request, id):
        interview_request = InterviewRequestService.get_request(id)
        return Response({
            "success": True,
            "data": InterviewRequestSerializer(interview_request).data,
        })

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Delete Interview Request",
        operation_description="Permanently delete an interview request.",
        responses={200: "Deleted", **ID_RESPONSES},
    )
    def delete(self, request, id):
        InterviewRequestService.delete_request(id)
        return Response({
            "success": True,
            "message": "Interview request deleted successfully",
        })


class InterviewRequestAcceptAPI(APIView):
    """
    Accept an interview request.

    PUT /api/interview-requests/{id}/accept/

    Requirements:
    - Interview request must be in 'pending' status

    Effects:
    - Status changes to 'accepted'
    - requestStatusUpdate broadcast to recruiters
    """

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Accept Interview Request",
        responses={200: InterviewRequestSerializer, **ID_RESPONSES},
    )
    def put(self, request, id):
        interview_request = InterviewRequestService.accept_request(id)
        return Response({
            "success": True,
            "message": "Interview request accepted successfully",
            "data": InterviewRequestSerializer(interview_request).data,
        })


class InterviewRequestRejectAPI(APIView):
    """
    Reject an interview request.

    PUT /api/interview-requests/{id}/reject/

    Requirements:
    - Interview request must be in 'pending' status

    Request Body (optional):
    - reason: Rejection reason
    """

    @swagger_auto_schema(
        tags=["Interview Requests"],
        operation_summary="Reject Interview Request",
        request_body=InterviewRequestRejectSerializer,
        responses={200: InterviewRequestSerializer, **ID_RESPONSES},
    )
    def put(self, request, id):
        serializer = InterviewRequestRejectSerializer(data=request.data)
        if not serializer.is_valid():
            raise RequestValidationError(
                details=[
                    {"field": field, "message": str(messages[0])}
                    for field, messages in serializer.errors.items()
                ]
            )

        interview_request = InterviewRequestService.reject_request(
            id, reason=serializer.validated_data.get("reason")
        )
        return Response({
            "success": True,
            "message": "Interview request rejected successfully",
            "data": InterviewRequestSerializer(interview_request).data,
        })
