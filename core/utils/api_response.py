"""
Standardized API Response Utilities
Consistent JSON envelopes for the player endpoints
"""

from django.http import JsonResponse
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class APIResponse:
    """
    Standardized API response handler
    """

    @staticmethod
    def success(data: Any = None, message: str = "Success", status_code: int = 200) -> JsonResponse:
        """
        Create a standardized success response

        Args:
            data: Response data
            message: Success message
            status_code: HTTP status code
        """
        response_data = {
            "success": True,
            "message": message,
            "data": data,
            "error": None,
            "error_type": None
        }

        return JsonResponse(response_data, status=status_code)

    @staticmethod
    def error(
        message: str = "An error occurred",
        error_type: str = "generic_error",
        data: Any = None,
        status_code: int = 400,
        details: Optional[str] = None
    ) -> JsonResponse:
        """
        Create a standardized error response

        Args:
            message: Error message
            error_type: Type of error
            data: Additional data
            status_code: HTTP status code
            details: Additional error details
        """
        response_data = {
            "success": False,
            "message": message,
            "data": data,
            "error": message,
            "error_type": error_type,
            "details": details
        }

        if status_code >= 500:
            logger.error(f"API error response {status_code}: {message}")

        return JsonResponse(response_data, status=status_code)

    @staticmethod
    def validation_error(errors: Any, message: str = "Validation failed") -> JsonResponse:
        return APIResponse.error(
            message=message,
            error_type="validation_error",
            data=errors,
            status_code=400,
            details="Please check your input and try again"
        )

    @staticmethod
    def not_found(
        message: str = "Resource not found",
        details: str = "The requested resource does not exist"
    ) -> JsonResponse:
        return APIResponse.error(
            message=message,
            error_type="not_found",
            status_code=404,
            details=details
        )
