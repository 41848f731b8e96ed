"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pandas as pd
import pytest

from hicframe.config import Settings
from hicframe.geometry import PlotRegion
from hicframe.page import Page, create_page
from hicframe.plots import HicSquare, HicTriangle
from hicframe.utils.logging import clear_correlation_context, configure_logging

CHROMSTART = 28_000_000
CHROMEND = 30_300_000
RESOLUTION = 10_000

# chrom1, start1, end1, chrom2, start2, end2
INSIDE_LOOP = ("chr21", 28_500_000, 28_510_000, "chr21", 29_000_000, 29_010_000)
OUTSIDE_LOOP = ("chr21", 31_000_000, 31_010_000, "chr21", 31_500_000, 31_510_000)
OTHER_CHROM_LOOP = ("chr22", 28_500_000, 28_510_000, "chr22", 29_000_000, 29_010_000)
PARTIAL_LOOP = ("chr21", 27_995_000, 28_005_000, "chr21", 29_000_000, 29_010_000)


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def page() -> Page:
    """A 3 x 3 inch page whose plain numbers are read as inches."""
    return create_page(width=3, height=3, units="inches", default_units="inches")


@pytest.fixture
def square_region() -> PlotRegion:
    """A 2 inch square placed half an inch from the top-left corner."""
    return PlotRegion.build(
        0.5, 0.5, 2, 2, default_units="inches", just=("left", "top")
    )


@pytest.fixture
def square_plot(square_region: PlotRegion) -> HicSquare:
    """A square Hi-C plot of chr21:28-30.3 Mb showing both halves."""
    return HicSquare(
        chrom="chr21",
        chromstart=CHROMSTART,
        chromend=CHROMEND,
        resolution=RESOLUTION,
        region=square_region,
    )


@pytest.fixture
def triangle_plot() -> HicTriangle:
    """A triangle Hi-C plot of chr21:28-30.3 Mb, 2 inches wide and 1 high."""
    region = PlotRegion.build(
        0.5, 0.5, 2, 1, default_units="inches", just=("left", "top")
    )
    return HicTriangle(
        chrom="chr21",
        chromstart=CHROMSTART,
        chromend=CHROMEND,
        resolution=RESOLUTION,
        region=region,
    )


@pytest.fixture
def loops_frame() -> pd.DataFrame:
    """Loop table with one loop inside chr21:28-30.3 Mb and three outside it."""
    return pd.DataFrame([INSIDE_LOOP, OUTSIDE_LOOP, OTHER_CHROM_LOOP, PARTIAL_LOOP])
