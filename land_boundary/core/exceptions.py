"""Engine exception taxonomy.

Geometry operations never raise: they return degenerate values or a
``ValidationResult``.  Exceptions are reserved for the edges of the
engine (configuration, payload ingress, model deserialisation and
collaborator providers), and every one of them inherits from
``BoundaryError`` so callers can handle the whole family uniformly.

Categories
----------
- ``ValidationError``: caller passed a value the engine does not accept.
- ``ContractError``: payload shape drift at the ingress boundary.
- Anything else is ``transient`` when retryable (a provider timeout, say)
  and ``permanent`` otherwise.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API responses.
"""

from __future__ import annotations


class BoundaryError(Exception):
    """Base exception for all engine-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Engine stage where the error occurred
            (e.g. ``"ingress"``, ``"config"``, ``"provider"``).
        code: Machine-readable error code (e.g. ``"INVALID_JSON"``).
        retryable: Whether the caller may retry the operation.
        correlation_id: Identifier of the walk or request, if any.
    """

    default_stage: str = ""
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


class ValidationError(BoundaryError):
    """A caller-supplied value is outside what the engine accepts."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(BoundaryError):
    """Payload shape drift at the engine boundary."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
