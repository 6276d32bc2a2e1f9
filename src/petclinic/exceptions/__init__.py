"""
Custom exceptions for the petclinic package.

This module defines the exception hierarchy and custom exceptions
used throughout the clinic application.
"""

from .core_exceptions import (
    ConfigurationException,
    ConnectionException,
    DatabaseException,
    EntityNotFoundException,
    MigrationException,
    PetClinicException,
    TransactionException,
    create_error_response,
    log_exception_context,
)

__all__ = [
    # Exception classes
    "PetClinicException",
    "DatabaseException",
    "ConnectionException",
    "TransactionException",
    "MigrationException",
    "EntityNotFoundException",
    "ConfigurationException",
    # Utility functions
    "create_error_response",
    "log_exception_context",
]
