"""Genomic windows shown along a plot axis."""

from __future__ import annotations

from typing import NamedTuple


class GenomicWindow(NamedTuple):
    """A chromosome range displayed along one plot axis.

    Attributes:
        chrom: Chromosome name (e.g. "chr21").
        start: First base pair of the window.
        end: Last base pair of the window.
    """

    chrom: str
    start: int
    end: int
