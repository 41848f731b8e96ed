"""Half selection for Hi-C annotations.

Reconciles the half an annotation asks for (inherit, both, top, bottom)
with the half the source Hi-C plot actually shows:

    - Square plot, axes not swapped: a plot restricted to one half rejects
      the other half and "both" with IncompatibleHalfError.
    - Square plot, axes swapped (``althalf`` set): every half is accepted;
      an info diagnostic records which chromosome sits on which axis.
    - Triangle plot: always "top". Asking for "both" or "bottom" yields a
      warning diagnostic and is overridden.

``inherit`` resolves to the plot's own half (its ``althalf`` when axes are
swapped, "top" for triangles). Resolved values are top, bottom or both.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from hicframe.annotate.diagnostics import (
    SWAPPED_AXES,
    TRIANGLE_HALF_OVERRIDE,
    Diagnostic,
)
from hicframe.exceptions import IncompatibleHalfError, InvalidHalfError
from hicframe.plots.matrix import Half, HicSquare, HicTriangle
from hicframe.utils.logging import get_logger

logger = get_logger(__name__)


class HalfResolution(NamedTuple):
    """Result of half selection.

    Attributes:
        half: Resolved half; never INHERIT.
        diagnostics: Non-fatal notes produced while resolving.
    """

    half: Half
    diagnostics: tuple[Diagnostic, ...] = ()


def parse_half(value: Any) -> Half:
    """Parse a half name.

    Raises:
        InvalidHalfError: If value is not inherit, both, top or bottom.
    """
    if isinstance(value, Half):
        return value
    try:
        return Half(str(value).strip().lower())
    except ValueError:
        raise InvalidHalfError(value) from None


def inherit_half(plot: HicSquare | HicTriangle) -> Half:
    """Return the half a plot shows, honoring swapped axes."""
    match plot:
        case HicSquare(althalf=None):
            return Half(plot.half)
        case HicSquare():
            return Half(plot.althalf)
        case HicTriangle():
            return Half.TOP


def _check_square_half(requested: Half, plot_half: Half) -> None:
    if plot_half is Half.BOTH or requested is Half.INHERIT:
        return
    if requested is Half.BOTH or requested is not plot_half:
        raise IncompatibleHalfError(requested.value, plot_half.value)


def resolve_half(requested: Any, plot: HicSquare | HicTriangle) -> HalfResolution:
    """Resolve the half an annotation is drawn on.

    Args:
        requested: "inherit", "both", "top" or "bottom".
        plot: Source Hi-C plot.

    Returns:
        HalfResolution with the resolved half and any diagnostics.

    Raises:
        InvalidHalfError: If requested is not a known half.
        IncompatibleHalfError: If an unswapped square plot cannot show the
            requested half.
    """
    half = parse_half(requested)
    diagnostics: list[Diagnostic] = []

    match plot:
        case HicTriangle():
            if half in (Half.BOTH, Half.BOTTOM):
                diagnostics.append(
                    Diagnostic.warning(
                        TRIANGLE_HALF_OVERRIDE,
                        "Triangle Hi-C plot detected. Annotations will "
                        "automatically be drawn in the upper triangle of the plot.",
                    )
                )
            resolved = Half.TOP
        case HicSquare(althalf=None):
            _check_square_half(half, Half(plot.half))
            resolved = inherit_half(plot) if half is Half.INHERIT else half
        case HicSquare():
            altchrom = plot.alt_window.chrom
            if plot.althalf == Half.BOTTOM:
                x_chrom, y_chrom = plot.chrom, altchrom
            else:
                x_chrom, y_chrom = altchrom, plot.chrom
            diagnostics.append(
                Diagnostic.info(
                    SWAPPED_AXES,
                    f"Attempting to annotate where {x_chrom} is on the x-axis "
                    f"and {y_chrom} is on the y-axis.",
                )
            )
            resolved = inherit_half(plot) if half is Half.INHERIT else half

    for diagnostic in diagnostics:
        diagnostic.log(logger)
    logger.debug("Half resolved", requested=half.value, resolved=resolved.value)
    return HalfResolution(resolved, tuple(diagnostics))
