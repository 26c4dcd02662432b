"""Unified exception taxonomy.

Every domain exception inherits from ``KmlViewerError`` and carries
structured context fields so the UI can report a single, consistent
failure message for an upload.

Taxonomy categories
-------------------
- ``ValidationError``   — the uploaded input itself is unusable
  (not XML, malformed coordinates, rejected file).
- ``ContractError``     — the document parses but lacks the structure
  the extractor requires (no ``Document``, no ``Placemark``).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and for the UI error banner.
"""

from __future__ import annotations


class KmlViewerError(Exception):
    """Base exception for all extractor-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Processing stage where the error occurred
            (e.g. ``"deserialize"``, ``"extract"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
        source: Name of the uploaded file, when known.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        source: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.source = source
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "source": self.source,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(KmlViewerError):
    """The uploaded input cannot be used as-is."""


class ContractError(KmlViewerError):
    """The document lacks the structure the extractor depends on."""
