"""
Core exceptions for the petclinic package.

Form validation problems are never raised; they travel as
``ValidationResult`` field errors. The exceptions here cover what the
application cannot recover from in place: missing records, database and
migration failures, and bad configuration.
"""

import logging
import time
from typing import Any, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class PetClinicException(Exception):
    """
    Root of the petclinic exception hierarchy.

    Carries a human-readable message, a stable machine-readable code and a
    dictionary of details that end up in logs and JSON error bodies.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": time.time(),
        }

    def log_error(
        self, logger: Optional[logging.Logger] = None, level: int = logging.ERROR
    ) -> None:
        """
        Log the exception together with its code and details.

        Args:
            logger: Logger to write to (the module logger when omitted)
            level: Logging level to use
        """
        logger = logger or logging.getLogger(__name__)
        logger.log(
            level,
            f"{self.error_code}: {self.message}",
            extra={"exception_data": self.to_dict()},
        )

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class DatabaseException(PetClinicException):
    """Base exception for failures reported by the database layer."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, error_code, details)
        self.original_error = original_error

        if original_error and "original_error" not in self.details:
            self.details["original_error"] = str(original_error)


class ConnectionException(DatabaseException):
    """The database could not be reached."""

    def __init__(
        self,
        message: str = "Database connection failed",
        database_url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Args:
            message: Error message
            database_url: URL that was tried; the password is masked
            original_error: Driver error, if any
        """
        details = {}
        if database_url:
            details["database_url"] = self._mask_password(database_url)

        super().__init__(
            message=message,
            error_code="DATABASE_CONNECTION_ERROR",
            details=details,
            original_error=original_error,
        )

    @staticmethod
    def _mask_password(url: str) -> str:
        try:
            return make_url(url).render_as_string(hide_password=True)
        except ArgumentError:
            return "[unparseable database URL]"


class TransactionException(DatabaseException):
    """A unit of work was rejected by the database and rolled back."""

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            error_code="DATABASE_TRANSACTION_ERROR",
            details=details,
            original_error=original_error,
        )


class MigrationException(DatabaseException):
    """An Alembic upgrade, downgrade or history lookup failed."""

    def __init__(
        self,
        message: str = "Database migration failed",
        migration_version: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if migration_version:
            details["migration_version"] = migration_version

        super().__init__(
            message=message,
            error_code="DATABASE_MIGRATION_ERROR",
            details=details,
            original_error=original_error,
        )


class EntityNotFoundException(PetClinicException):
    """A lookup by id found no row. The web layer answers with a 404."""

    def __init__(
        self,
        entity_name: str,
        entity_id: Any,
        message: Optional[str] = None,
    ):
        """
        Args:
            entity_name: Name of the entity class that was looked up
            entity_id: Identifier that was not found
            message: Optional override for the error message
        """
        super().__init__(
            message=message or f"{entity_name} with id {entity_id} not found",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": entity_id},
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConfigurationException(PetClinicException):
    """A setting is missing or holds an unusable value."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
    ):
        details = {}
        if config_key:
            details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )


def create_error_response(exception: PetClinicException) -> Dict[str, Any]:
    """
    Build the JSON body returned for a petclinic exception.

    Args:
        exception: The exception to format

    Returns:
        ``{"success": False, "error": {...}}``
    """
    response: Dict[str, Any] = {
        "success": False,
        "error": {
            "type": exception.__class__.__name__,
            "code": exception.error_code,
            "message": exception.message,
        },
    }

    if exception.details:
        response["error"]["details"] = exception.details

    return response


def log_exception_context(
    exception: Exception,
    context: Dict[str, Any],
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an exception with request context attached.

    Args:
        exception: The exception to log
        context: Extra information such as the request method and path
        logger: Logger to write to (the module logger when omitted)
        level: Logging level
    """
    logger = logger or logging.getLogger(__name__)

    if isinstance(exception, PetClinicException):
        log_data = exception.to_dict()
        log_data["context"] = context
        logger.log(
            level,
            f"{exception.error_code} while handling request: {exception.message}",
            extra={"exception_data": log_data},
        )
    else:
        logger.log(
            level,
            f"Unhandled exception: {exception}",
            exc_info=exception,
            extra={
                "exception_type": exception.__class__.__name__,
                "context": context,
            },
        )
