"""Genomic inputs for hicframe.

Key Components:
    - Assembly: genome assembly and its chromosome naming convention
    - GenomicWindow: chromosome range shown along a plot axis
    - BEDPE tables: loading, chromosome checks, and region subsetting
"""

from hicframe.genome.assembly import Assembly
from hicframe.genome.bedpe import (
    BEDPE_COLUMNS,
    check_chromosome_format,
    normalize_pairs,
    read_bedpe,
    subset_pairs,
)
from hicframe.genome.window import GenomicWindow

__all__ = [
    "BEDPE_COLUMNS",
    "Assembly",
    "GenomicWindow",
    "check_chromosome_format",
    "normalize_pairs",
    "read_bedpe",
    "subset_pairs",
]
