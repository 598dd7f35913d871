"""
Exception hierarchy for catalog operations.

Use cases raise these; controllers translate them to HTTP responses. Every
error carries the user-facing ``message`` returned to the caller.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import List

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ..domain.models.catalog_kind import CatalogKind


@dataclass(frozen=True)
class Violation:
    """One failed payload constraint."""
    field: str
    constraint: str
    message: str


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Rejected input
# -----------------------------------------------------------------------------


class PayloadValidationError(CatalogError):
    """Raised when a request body does not match its entity schema."""

    def __init__(self, violations: List[Violation]):
        if not violations:
            raise ValueError("PayloadValidationError requires at least one violation")
        super().__init__(violations[0].message)
        self.violations = violations


class ReferentialIntegrityError(CatalogError):
    """Raised when an embedded reference does not resolve to a stored parent."""

    def __init__(self, kind: CatalogKind):
        super().__init__(f"Invalid {kind.label.lower()}")
        self.kind = kind


# -----------------------------------------------------------------------------
# Store state
# -----------------------------------------------------------------------------


class EntityNotFoundError(CatalogError):
    """Raised when no entity carries the requested key."""

    def __init__(self, kind: CatalogKind, key: str):
        super().__init__(f"{kind.label} not found")
        self.kind = kind
        self.key = key


class DuplicateKeyError(CatalogError):
    """Raised when unique keys are enforced and the key is already taken."""

    def __init__(self, kind: CatalogKind, key: str):
        super().__init__(f"{kind.label} already exists")
        self.kind = kind
        self.key = key


class EntityInUseError(CatalogError):
    """Raised when referenced parents are protected and dependents still exist."""

    def __init__(self, kind: CatalogKind, key: str):
        super().__init__(f"{kind.label} is in use")
        self.kind = kind
        self.key = key
