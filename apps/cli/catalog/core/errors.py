"""
Error taxonomy for the catalog REPL.

Every error carries the same envelope as `detail`:
- error:   machine code (usage_error, validation_error, not_found, ...)
- message: text shown to the user
- details: optional structured context for logs
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogError(Exception):
    code = "catalog_error"

    def __init__(self, message: str, *, code: Optional[str] = None, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details

    @property
    def detail(self) -> Dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class UsageError(CatalogError):
    """Wrong argument count for a command."""

    code = "usage_error"


class ValidationError(CatalogError):
    """A token was rejected by a value parser or the field registry."""

    code = "validation_error"


class NotFoundError(CatalogError):
    code = "not_found"


class StoreError(CatalogError):
    code = "store_error"


class ConfigError(CatalogError):
    """Setup failure; raised before the loop starts and never recovered."""

    code = "config_error"
