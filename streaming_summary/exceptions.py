"""Errors raised while validating streaming history input"""
from typing import Any, Dict, Optional

class MalformedInput(ValueError):
    """
    Raised when an upload is not a sequence of play-event objects.

    The whole batch is rejected; no partial result is ever produced.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)
