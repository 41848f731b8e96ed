"""Structured diagnostics for annotation calls.

Non-fatal conditions (nothing to draw, an overridden half, a defaulted
arrow fill) do not stop a call. They are returned on the result as
Diagnostic records and logged, so callers can inspect them without
parsing log output.
"""

from __future__ import annotations

from typing import Literal

import structlog
from pydantic import BaseModel, Field


class Diagnostic(BaseModel, frozen=True):
    """A non-fatal condition reported by an annotation call.

    Attributes:
        level: "info" for orientation notes, "warning" for fallbacks.
        code: Stable machine-readable identifier.
        message: Human-readable description.
    """

    level: Literal["info", "warning"]
    code: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    @classmethod
    def info(cls, code: str, message: str) -> Diagnostic:
        """Create an informational diagnostic."""
        return cls(level="info", code=code, message=message)

    @classmethod
    def warning(cls, code: str, message: str) -> Diagnostic:
        """Create a warning diagnostic."""
        return cls(level="warning", code=code, message=message)

    def log(self, logger: structlog.stdlib.BoundLogger) -> None:
        """Emit the diagnostic at its level."""
        if self.level == "warning":
            logger.warning(self.message, code=self.code)
        else:
            logger.info(self.message, code=self.code)


# Diagnostic codes
EMPTY_INPUT = "empty_input"
NO_ELEMENTS = "no_elements"
TRIANGLE_HALF_OVERRIDE = "triangle_half_override"
SWAPPED_AXES = "swapped_axes"
ARROW_DEFAULT_FILL = "arrow_default_fill"
