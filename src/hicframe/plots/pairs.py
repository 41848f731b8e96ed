"""Plots drawn from BEDPE interval pairs (e.g. loop arches)."""

from __future__ import annotations

from typing import Any, Self

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hicframe.config import settings
from hicframe.genome.assembly import Assembly
from hicframe.genome.bedpe import normalize_pairs
from hicframe.genome.window import GenomicWindow
from hicframe.geometry.primitives import DataScale, PlotRegion


class BedpePlot(BaseModel):
    """A one-dimensional genomic plot built from interval pairs.

    Attributes:
        chrom: Chromosome shown along the x axis.
        chromstart: Start of the window.
        chromend: End of the window.
        assembly: Genome assembly.
        region: Placement of the plot on the page.
        bedpe: Interval pairs the plot displays, or None if the plot does
            not use BEDPE data.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    chrom: str = Field(..., min_length=1)
    chromstart: int = Field(..., ge=0)
    chromend: int = Field(..., gt=0)
    assembly: Assembly = Field(
        default_factory=lambda: Assembly.from_name(settings.DEFAULT_ASSEMBLY)
    )
    region: PlotRegion
    bedpe: pd.DataFrame | None = None

    @field_validator("assembly", mode="before")
    @classmethod
    def _parse_assembly(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Assembly.from_name(value)
        return value

    @field_validator("bedpe")
    @classmethod
    def _normalize_bedpe(cls, value: pd.DataFrame | None) -> pd.DataFrame | None:
        return None if value is None else normalize_pairs(value)

    @model_validator(mode="after")
    def _validate_window(self) -> Self:
        if self.chromend <= self.chromstart:
            raise ValueError("chromend must be greater than chromstart")
        return self

    @property
    def window(self) -> GenomicWindow:
        """Return the genomic window along the x axis."""
        return GenomicWindow(self.chrom, self.chromstart, self.chromend)

    @property
    def xscale(self) -> DataScale:
        """Return the genomic x scale of the plot."""
        return self.region.xscale or (float(self.chromstart), float(self.chromend))
