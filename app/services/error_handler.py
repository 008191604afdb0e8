"""
Error handling service for consistent error responses and logging.
Errors are rendered as plain-text bodies carrying only the HTTP status and a message.
"""

from typing import Any, Dict, List, Optional, Sequence
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from app.utils.exceptions import APIException
import logging
import uuid

logger = logging.getLogger(__name__)

FORM_PARSE_ERROR = "Unable to parse form data"


class ErrorHandlerService:
    """
    Service for handling and formatting errors consistently across the application.
    """

    @staticmethod
    def plain_text_response(
        status_code: int,
        message: str,
        headers: Optional[Dict[str, str]] = None
    ) -> PlainTextResponse:
        return PlainTextResponse(content=message, status_code=status_code, headers=headers)

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> PlainTextResponse:
        """
        Handle custom API exceptions.

        Args:
            exception: API exception instance
            request: Optional FastAPI request object

        Returns:
            Plain-text response with the exception detail
        """
        request_id = ErrorHandlerService._get_request_id(request)
        log = logger.error if exception.status_code >= 500 else logger.warning
        log(
            f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
            extra={
                "error_code": exception.error_code,
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        return ErrorHandlerService.plain_text_response(
            exception.status_code, str(exception.detail), exception.headers
        )

    @staticmethod
    def handle_validation_error(
        exception: RequestValidationError,
        request: Optional[Request] = None
    ) -> PlainTextResponse:
        """
        Handle request body, path and query validation errors as client errors.
        A body that is not valid JSON is reported as a parse failure.
        """
        request_id = ErrorHandlerService._get_request_id(request)
        errors = exception.errors()

        if any(error.get("type") == "json_invalid" for error in errors):
            message = "Failed to parse request body"
        else:
            message = "Invalid request: " + ErrorHandlerService.format_validation_errors(errors)

        logger.warning(
            f"Validation Error [{request_id}]: {len(errors)} field errors",
            extra={
                "error_count": len(errors),
                "request_id": request_id,
                "path": request.url.path if request else None,
            }
        )

        return ErrorHandlerService.plain_text_response(400, message)

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> PlainTextResponse:
        """
        Handle FastAPI and Starlette HTTP exceptions, e.g. unparseable multipart bodies.
        """
        request_id = ErrorHandlerService._get_request_id(request)
        logger.warning(
            f"HTTP Exception [{request_id}]: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        message = str(exception.detail)
        if exception.status_code == 400 and ErrorHandlerService._is_form_request(request):
            message = f"{FORM_PARSE_ERROR}: {message}"

        return ErrorHandlerService.plain_text_response(
            exception.status_code, message, getattr(exception, "headers", None)
        )

    @staticmethod
    def _is_form_request(request: Optional[Request]) -> bool:
        if request is None:
            return False
        return request.headers.get("content-type", "").startswith("multipart/form-data")

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> PlainTextResponse:
        """
        Handle unexpected errors without exposing internal details.
        """
        request_id = ErrorHandlerService._get_request_id(request)
        logger.error(
            f"Unexpected Error [{request_id}]: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__,
            },
            exc_info=exception
        )

        return ErrorHandlerService.plain_text_response(500, "Internal server error")

    @staticmethod
    def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
        """Join pydantic error entries as 'field -> sub: message' pairs."""
        parts: List[str] = []
        for error in errors:
            location = [str(loc) for loc in error.get("loc", ()) if loc != "body"]
            field_path = " -> ".join(location)
            parts.append(f"{field_path}: {error.get('msg')}" if field_path else str(error.get("msg")))
        return "; ".join(parts)

    @staticmethod
    def _get_request_id(request: Optional[Request]) -> str:
        """Reuse the id assigned by the request middleware, or generate one."""
        if request is not None:
            request_id = getattr(request.state, "request_id", None)
            if request_id:
                return request_id
        return str(uuid.uuid4())[:8]
