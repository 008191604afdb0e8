"""
Request validation middleware.
Assigns request ids, logs requests and rejects oversized uploads before the body is parsed.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time
import uuid

from app.services.error_handler import FORM_PARSE_ERROR, ErrorHandlerService
from app.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# Allowance for multipart boundaries and part headers on top of the file itself
MULTIPART_OVERHEAD = 64 * 1024


class RequestValidationMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request preprocessing.
    Handles request ids, upload size limits and request logging.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_upload_size: int = 10 * 1024 * 1024,  # 10MiB
        enable_request_logging: bool = True,
        max_query_param_length: int = 1000
    ):
        super().__init__(app)
        self.max_upload_size = max_upload_size
        self.enable_request_logging = enable_request_logging
        self.max_query_param_length = max_query_param_length

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request through validation middleware.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object
        """
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()

        try:
            self._validate_upload_size(request)
            self._validate_query_parameters(request)

            if self.enable_request_logging:
                self._log_request(request, request_id)

            response = await call_next(request)

            if self.enable_request_logging:
                processing_time = time.time() - start_time
                self._log_response(request, response, request_id, processing_time)

        except BadRequestError as exc:
            response = ErrorHandlerService.handle_api_exception(exc, request)
        except Exception as exc:
            response = ErrorHandlerService.handle_unexpected_error(exc, request)

        response.headers["X-Request-ID"] = request_id
        return response

    def _validate_upload_size(self, request: Request) -> None:
        """
        Reject multipart bodies whose declared length exceeds the upload limit.

        Raises:
            BadRequestError: If the declared size is too large or not a number
        """
        content_type = request.headers.get("content-type", "")
        if not content_type.startswith("multipart/form-data"):
            return

        content_length = request.headers.get("content-length")
        if not content_length:
            return
        try:
            size = int(content_length)
        except ValueError:
            raise BadRequestError("Invalid content-length header")

        if size > self.max_upload_size + MULTIPART_OVERHEAD:
            raise BadRequestError(
                f"{FORM_PARSE_ERROR}: request size {size} bytes exceeds "
                f"maximum allowed size {self.max_upload_size} bytes"
            )

    def _validate_query_parameters(self, request: Request) -> None:
        for key, value in request.query_params.items():
            if len(value) > self.max_query_param_length:
                raise BadRequestError(f"Query parameter '{key}' exceeds maximum length")

    def _get_client_ip(self, request: Request) -> str:
        # Check for forwarded headers (load balancer/proxy)
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        return request.client.host if request.client else "unknown"

    def _log_request(self, request: Request, request_id: str) -> None:
        logger.info(
            f"Request [{request_id}]: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": self._get_client_ip(request),
            }
        )

    def _log_response(
        self,
        request: Request,
        response: Response,
        request_id: str,
        processing_time: float
    ) -> None:
        logger.info(
            f"Response [{request_id}]: {response.status_code} - {processing_time:.3f}s",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "processing_time": processing_time,
                "path": request.url.path,
                "method": request.method
            }
        )
