"""Page (drawing session) for hicframe.

A Page is the fixed-size canvas every plot and annotation is placed on. It
holds the page's size and unit and the registry of viewport names created
during the session. It is passed explicitly into every drawing call; one
page is one session, and callers must not share a page between concurrent
calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any
from uuid import uuid4

from hicframe.config import settings
from hicframe.geometry.units import Unit, convert_length, resolve_length
from hicframe.geometry.viewport import Viewport
from hicframe.utils.logging import (
    clear_correlation_context,
    get_logger,
    set_correlation_context,
)

logger = get_logger(__name__)

_UNSET: Any = object()


@dataclass
class Page:
    """The active drawing session.

    Attributes:
        width: Page width in ``units``.
        height: Page height in ``units``.
        units: Physical unit of the page coordinate system.
        default_units: Unit attached to plain numbers when a call does not
            name one. None forces every caller to be explicit.
        page_id: Identifier used to correlate log events.
        viewports: Names of all viewports composed on this page, in order.
    """

    width: float
    height: float
    units: Unit = Unit.INCHES
    default_units: Unit | None = Unit.INCHES
    page_id: str = field(default_factory=lambda: uuid4().hex[:12])
    viewports: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.units = Unit.parse(self.units)
        if self.units is Unit.NATIVE:
            raise ValueError("Page units must be physical, not 'native'")
        if self.default_units is not None:
            self.default_units = Unit.parse(self.default_units)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Page dimensions must be positive, got {self.width}x{self.height}"
            )

    def next_viewport_name(self, category: str) -> str:
        """Return the next unused name for a viewport category.

        Names are ``<category><n>``; n is one more than the largest suffix
        already registered for the category.
        """
        pattern = re.compile(rf"^{re.escape(category)}(\d+)$")
        used = [
            int(match.group(1))
            for name in self.viewports
            if (match := pattern.match(name)) is not None
        ]
        return f"{category}{max(used, default=0) + 1}"

    def register_viewport(self, category: str) -> str:
        """Reserve and record the next name for a viewport category."""
        name = self.next_viewport_name(category)
        self.viewports.append(name)
        set_correlation_context(page_id=self.page_id, viewport=name)
        return name

    def root_viewport(self) -> Viewport:
        """Return an unregistered viewport covering the whole page.

        Its native scales are page units, so shapes placed in it are
        positioned directly in page coordinates.
        """
        return Viewport(
            name="ROOT",
            x=0.0,
            y=0.0,
            width=self.width,
            height=self.height,
            hjust=0.0,
            vjust=0.0,
            xscale=(0.0, self.width),
            yscale=(0.0, self.height),
        )

    def close(self) -> None:
        """End the session and forget all registered viewports."""
        logger.debug("Page closed", page_id=self.page_id, viewports=len(self.viewports))
        self.viewports.clear()
        clear_correlation_context()

    def __enter__(self) -> Page:
        """Enter context manager."""
        set_correlation_context(page_id=self.page_id)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager and close the page."""
        self.close()


def create_page(
    width: Any,
    height: Any,
    *,
    units: str | Unit | None = None,
    default_units: Any = _UNSET,
) -> Page:
    """Create a new page (drawing session).

    Args:
        width: Page width, a number in ``units`` or a PhysicalLength.
        height: Page height, a number in ``units`` or a PhysicalLength.
        units: Page unit. Defaults to settings.PAGE_UNITS.
        default_units: Unit for plain numbers in later calls. Defaults to
            settings.DEFAULT_UNITS; pass None to require explicit units.

    Returns:
        The new Page.

    Example:
        >>> with create_page(width=3, height=3, units="inches") as page:
        ...     page.next_viewport_name("loopAnnotation")
        'loopAnnotation1'
    """
    page_units = Unit.parse(units or settings.PAGE_UNITS)
    if default_units is _UNSET:
        default_units = settings.DEFAULT_UNITS

    page = Page(
        width=convert_length(resolve_length(width, page_units, name="width"), page_units),
        height=convert_length(
            resolve_length(height, page_units, name="height"), page_units
        ),
        units=page_units,
        default_units=default_units,
    )
    logger.info(
        "Page created",
        page_id=page.page_id,
        width=page.width,
        height=page.height,
        units=page.units.value,
    )
    return page
