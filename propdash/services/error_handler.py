"""
Error handling service for list-view input errors.

List views never surface errors to the user: bad query input degrades to a
default value and bad record rows are skipped. The handler records what was
degraded or skipped so it can be logged and shown in diagnostics.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from .logging_service import get_structured_logger

logger = get_structured_logger(__name__)


class ErrorHandler:
    """Centralized error handling service."""

    def __init__(self):
        self.logger = logger
        self.handled: List[Dict[str, Any]] = []

    def handle_exception(
        self,
        exception: Exception,
        context: Optional[str] = None,
        additional_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Handle exception with logging and user-friendly error message."""
        error_id = self._generate_error_id()

        self.logger.error(
            "Exception occurred",
            error_id=error_id,
            error_type=type(exception).__name__,
            context=context or "unknown context",
            operation="handle_exception",
            **(additional_data or {}),
        )
        result = {
            "success": False,
            "error_id": error_id,
            "message": self._get_user_friendly_message(exception),
            "type": type(exception).__name__,
            "timestamp": datetime.now().isoformat(),
        }
        self.handled.append(result)
        return result

    def handle_validation_error(
        self, field: str, value: Any, message: str, context: Optional[str] = None
    ) -> Dict[str, Any]:
        """Handle validation errors."""
        error_id = self._generate_error_id()

        self.logger.warning(
            "Validation error",
            error_id=error_id,
            field=field,
            value=repr(value),
            message=message,
            context=context or "unknown context",
            operation="handle_validation_error",
        )
        result = {
            "success": False,
            "error_id": error_id,
            "message": message,
            "field": field,
            "type": "ValidationError",
            "timestamp": datetime.now().isoformat(),
        }
        self.handled.append(result)
        return result

    @property
    def has_errors(self) -> bool:
        return bool(self.handled)

    def _generate_error_id(self) -> str:
        """Generate unique error ID for tracking."""
        return str(uuid.uuid4())[:8]

    def _get_user_friendly_message(self, exception: Exception) -> str:
        """Convert technical exceptions to user-friendly messages."""
        error_messages = {
            "ValidationError": "A record does not match the expected format and was skipped.",
            "ValueError": "Invalid input provided. Please check your data.",
        }
        return error_messages.get(
            type(exception).__name__,
            "An unexpected error occurred. Please try again.",
        )
