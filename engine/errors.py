from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class EngineError(Exception):
    """Consistent engine-level exception with a machine-readable code."""

    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:  # pragma: no cover - convenience for logging
        return f"{self.code}: {self.message} | {self.details}"


class InvalidAttributeError(EngineError):
    """Raised when an attribute selector is outside the 1-6 menu range."""

    def __init__(self, selector: Any) -> None:
        super().__init__(
            "INVALID_ATTRIBUTE",
            f"Invalid attribute selector '{selector}'. Must be an integer from 1 to 6.",
            {"selector": selector},
        )
