"""Custom exceptions for hicframe.

Every error is fatal to the drawing call that raised it. Errors carry the
context needed to locate the bad input (argument name, offending value,
column) and render it into their message.
"""

from __future__ import annotations

from typing import Any


class HicFrameError(Exception):
    """Base exception for all hicframe errors."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize error with optional context fields.

        Args:
            message: Human-readable error description.
            **context: Named values rendered after the message
                (``None`` values are omitted).
        """
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class MissingUnitError(HicFrameError):
    """Raised when a numeric coordinate has no resolvable default unit."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"{name} detected as numeric. 'default_units' must be specified."
        )


class InvalidCoordinateTypeError(HicFrameError):
    """Raised when a coordinate is neither numeric nor a physical length.

    Also raised when a length in ``native`` units is asked to be placed on
    the page, where no data scale exists to interpret it.
    """

    def __init__(self, name: str, value: Any, reason: str | None = None) -> None:
        self.name = name
        self.value = value
        message = reason or (
            f"{name} is neither a physical length nor a numeric value. "
            "Cannot place object."
        )
        super().__init__(message, value=value)


class ChromosomeFormatError(HicFrameError):
    """Raised when chromosome names violate the assembly's naming convention."""

    def __init__(self, column: int, assembly: str, prefix: str) -> None:
        self.column = column
        self.assembly = assembly
        self.prefix = prefix
        super().__init__(
            f"Chromosomes in column {column} are in invalid format for "
            f"{assembly} genome assembly. Please specify chromosomes as a "
            f"string with the following format: '{prefix}1'."
        )


class InvalidHalfError(HicFrameError):
    """Raised when a half is not one of inherit, both, top or bottom."""

    def __init__(self, half: Any) -> None:
        self.half = half
        super().__init__(
            "Invalid 'half'. Options are 'inherit', 'both', 'top', or 'bottom'.",
            half=half,
        )


class IncompatibleHalfError(HicFrameError):
    """Raised when the requested half cannot be drawn on the source plot."""

    def __init__(self, requested: str, plot_half: str) -> None:
        self.requested = requested
        self.plot_half = plot_half
        super().__init__(
            "Invalid 'half' of plot to annotate.",
            requested=requested,
            plot_half=plot_half,
        )


class UnsupportedShapeKindError(HicFrameError):
    """Raised when an annotation shape kind is not box, circle or arrow."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(
            "Invalid 'type' of annotation. Options are 'box', 'circle', or 'arrow'.",
            type=kind,
        )


class MissingRequiredArgumentError(HicFrameError):
    """Raised when a required input was supplied neither directly nor via params."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"argument '{argument}' is missing, with no default.")


class BedpeFormatError(HicFrameError):
    """Raised when an interval-pair table is not valid BEDPE.

    Covers tables with fewer than six columns, coordinates that are not
    integers, and intervals whose end precedes their start.
    """

    def __init__(
        self,
        n_columns: int | None = None,
        reason: str | None = None,
        *,
        column: str | None = None,
        row: Any = None,
    ) -> None:
        self.n_columns = n_columns
        self.column = column
        self.row = row
        message = reason or "Invalid dataframe format. Dataframe must be in BEDPE format."
        super().__init__(message, columns=n_columns, column=column, row=row)


class MissingBedpeDataError(HicFrameError):
    """Raised when anchors are requested for a plot without BEDPE data."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot annotate bedpe anchors of a plot that does not use bedpe data."
        )
