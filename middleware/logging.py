"""
RecipeGen Logging Middleware
Structured logging with request/response tracking and performance monitoring
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
import time
import uuid
from typing import Dict, Any, Optional
from contextvars import ContextVar

logger = structlog.get_logger()

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SLOW_REQUEST_SECONDS = 2.0


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logging middleware that provides:
    - Request/response logging with unique IDs
    - Slow request warnings
    - Error tracking
    """

    def __init__(self, app):
        super().__init__(app)

        # Paths to exclude from detailed logging
        self.exclude_paths = {
            "/api/health", "/favicon.ico"
        }

        # Sensitive headers to mask in logs
        self.sensitive_headers = {
            "authorization", "cookie", "x-api-key"
        }

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

        request_id_var.set(request_id)
        request.state.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            if any(request.url.path.startswith(path) for path in self.exclude_paths):
                response = await call_next(request)
                response.headers["X-Request-ID"] = request_id
                return response

            request_info = self._extract_request_info(request, request_id)

            logger.info(
                "Request started",
                **request_info,
                event_type="request_start"
            )

            response = await call_next(request)

            process_time = time.time() - start_time
            response_info = self._extract_response_info(response, process_time)

            logger.log(
                self._determine_log_level(response.status_code),
                "Request completed",
                method=request_info["method"],
                path=request_info["path"],
                **response_info,
                event_type="request_complete"
            )

            if process_time > SLOW_REQUEST_SECONDS:
                logger.warning(
                    "Slow request detected",
                    endpoint=f"{request_info['method']} {request_info['path']}",
                    response_time=process_time,
                    event_type="slow_request"
                )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = str(round(process_time, 4))
            return response

        except Exception as e:
            process_time = time.time() - start_time

            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                client_ip=self._get_client_ip(request),
                process_time=process_time,
                error=str(e),
                error_type=type(e).__name__,
                event_type="request_error"
            )

            raise

    def _extract_request_info(self, request: Request, request_id: str) -> Dict[str, Any]:
        info = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("user-agent", ""),
            "headers": self._filter_headers(dict(request.headers)),
        }

        user_id = self._extract_user_id(request)
        if user_id is not None:
            info["user_id"] = user_id
            structlog.contextvars.bind_contextvars(user_id=user_id)

        return info

    def _extract_response_info(self, response: Response, process_time: float) -> Dict[str, Any]:
        return {
            "status_code": response.status_code,
            "process_time": round(process_time, 4),
        }

    def _extract_user_id(self, request: Request) -> Optional[int]:
        """User id from a valid bearer token; None for anonymous or invalid tokens"""
        auth_header = request.headers.get("authorization", "")
        if not auth_header.lower().startswith("bearer "):
            return None

        # Imported here: the auth service itself logs through this module
        from core.exceptions import AuthError
        from services.auth_service import auth_service

        try:
            return auth_service.verify_token(auth_header[7:].strip())["id"]
        except AuthError:
            return None

    def _get_client_ip(self, request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        forwarded = request.headers.get("x-real-ip")
        if forwarded:
            return forwarded

        return request.client.host if request.client else "unknown"

    def _filter_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Filter sensitive headers from logs"""
        filtered = {}
        for key, value in headers.items():
            if key.lower() in self.sensitive_headers:
                filtered[key] = "***MASKED***"
            else:
                filtered[key] = value
        return filtered

    def _determine_log_level(self, status_code: int) -> int:
        if status_code >= 500:
            return 40  # ERROR
        elif status_code >= 400:
            return 30  # WARNING
        return 20  # INFO


# Utility functions for structured logging
def get_request_id() -> str:
    """Get current request ID from context"""
    return request_id_var.get()


def log_business_event(event: str, data: Dict[str, Any] = None):
    """Log business events for analytics"""
    logger.info(
        "Business event",
        request_id=get_request_id(),
        business_event=event,
        data=data or {},
        event_type="business_event"
    )
