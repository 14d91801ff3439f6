"""
Palindrome API — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the three failure classes.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers registered in main.py turn them into
       single-field `{"error": message}` JSON responses.
Who:   Raised by routes, WordStore, config and the startup sequence.

Exception Hierarchy:
    PalindromeAPIError (base)
    ├── ValidationError  → 400 Bad Request (required input missing)
    ├── StorageError     → 500 Internal Server Error (store unreachable/failed)
    └── StartupError     → fatal, the process never starts serving
"""

from typing import Any, Dict, Optional


class PalindromeAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing error description (safe to return in a response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PalindromeAPIError):
    """
    Raised when client input is missing.

    When:    POST /savepalindrome without a `word` query parameter.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Word query parameter is required"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class StorageError(PalindromeAPIError):
    """
    Raised when the word store cannot complete an operation.

    When:    Connection lost, insert/select/delete failed.
    HTTP:    500 Internal Server Error

    The message is a fixed, operation-specific text ("Failed to save the word").
    The underlying driver error goes into `context` and is only logged.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StartupError(PalindromeAPIError):
    """
    Raised when the service cannot start.

    When:    Missing configuration file, database unreachable while creating
             the schema.
    Effect:  Propagates out of the lifespan; uvicorn aborts startup.
    """

    def __init__(
        self,
        message: str = "Service startup failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
