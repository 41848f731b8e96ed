"""BEDPE interval-pair tables and region subsetting.

A BEDPE table lists pairwise genomic features (e.g. chromatin loops), one
per row, with at least six positional columns:
chrom1, start1, end1, chrom2, start2, end2. Extra columns are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pandas as pd

from hicframe.exceptions import BedpeFormatError, ChromosomeFormatError
from hicframe.genome.assembly import Assembly
from hicframe.utils.logging import get_logger

if TYPE_CHECKING:
    from hicframe.plots.matrix import MatrixPlot

logger = get_logger(__name__)

BEDPE_COLUMNS = ["chrom1", "start1", "end1", "chrom2", "start2", "end2"]
_COORDINATE_COLUMNS = ["start1", "end1", "start2", "end2"]


def _first_row(mask: pd.Series) -> Any:
    return mask[mask].index.tolist()[0]


def normalize_pairs(frame: pd.DataFrame) -> pd.DataFrame:
    """Keep the first six columns of a BEDPE table under canonical names.

    Chromosome columns become strings and coordinate columns integers.
    Normalizing an already-normalized table returns an equal table.

    Raises:
        BedpeFormatError: If the table has fewer than six columns, a
            coordinate is missing or not a whole number, or an interval
            ends before it starts.
    """
    if frame.shape[1] < len(BEDPE_COLUMNS):
        raise BedpeFormatError(frame.shape[1])

    pairs = frame.iloc[:, : len(BEDPE_COLUMNS)].copy()
    pairs.columns = BEDPE_COLUMNS
    pairs["chrom1"] = pairs["chrom1"].astype(str)
    pairs["chrom2"] = pairs["chrom2"].astype(str)

    coordinates = pairs[_COORDINATE_COLUMNS].apply(pd.to_numeric, errors="coerce")
    for column in _COORDINATE_COLUMNS:
        values = coordinates[column]
        invalid = values.isna() | (values % 1 != 0)
        if invalid.any():
            raise BedpeFormatError(
                reason="Genomic coordinates must be whole numbers.",
                column=column,
                row=_first_row(invalid),
            )
    pairs[_COORDINATE_COLUMNS] = coordinates.astype("int64")

    for start, end in (("start1", "end1"), ("start2", "end2")):
        reversed_ = pairs[end] < pairs[start]
        if reversed_.any():
            raise BedpeFormatError(
                reason=f"Interval {end} precedes {start}.",
                column=end,
                row=_first_row(reversed_),
            )
    return pairs


def read_bedpe(source: str | Path | pd.DataFrame) -> pd.DataFrame:
    """Load interval pairs from a BEDPE file or an existing DataFrame.

    Files are tab separated without a header; lines starting with "#" are
    skipped. An empty file yields an empty table.

    Args:
        source: Path to a BEDPE file, or a DataFrame in BEDPE column order.

    Returns:
        The normalized interval-pair table.

    Raises:
        FileNotFoundError: If the path does not exist.
        BedpeFormatError: If the table is not valid BEDPE (see
            normalize_pairs).
    """
    if isinstance(source, pd.DataFrame):
        return normalize_pairs(source)

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File {path} does not exist.")

    try:
        frame = pd.read_csv(path, sep="\t", header=None, comment="#")
    except pd.errors.EmptyDataError:
        frame = pd.DataFrame(columns=BEDPE_COLUMNS)

    logger.debug("BEDPE file loaded", path=str(path), rows=len(frame))
    return normalize_pairs(frame)


def check_chromosome_format(pairs: pd.DataFrame, assembly: Assembly) -> None:
    """Verify chromosome names follow the assembly's naming convention.

    Raises:
        ChromosomeFormatError: If any name in column 1 or 4 lacks the
            assembly's required prefix.
    """
    if assembly.chrom_prefix is None:
        return
    for position, column in ((1, "chrom1"), (4, "chrom2")):
        names = pairs[column].astype(str)
        if not names.str.startswith(assembly.chrom_prefix).all():
            raise ChromosomeFormatError(position, assembly.name, assembly.chrom_prefix)


def subset_pairs(plot: MatrixPlot, pairs: pd.DataFrame) -> pd.DataFrame:
    """Keep interval pairs fully contained in a plot's genomic windows.

    The first interval must lie in the plot's primary window and the second
    in its alternate window (the primary window again for plots without a
    distinct alternate axis). Bounds are inclusive; partially contained
    records are dropped. Row order and index are preserved.

    Args:
        plot: Square or triangle Hi-C plot.
        pairs: Interval-pair table with at least six columns.

    Returns:
        The matching rows; empty when nothing falls in the windows.
    """
    pairs = normalize_pairs(pairs)
    window = plot.window
    alt = plot.alt_window

    mask = (
        (pairs["chrom1"] == window.chrom)
        & (pairs["chrom2"] == alt.chrom)
        & (pairs["start1"] >= window.start)
        & (pairs["end1"] <= window.end)
        & (pairs["start2"] >= alt.start)
        & (pairs["end2"] <= alt.end)
    )
    subset = pairs.loc[mask]
    logger.debug(
        "Interval pairs subset",
        window=f"{window.chrom}:{window.start}-{window.end}",
        alt_window=f"{alt.chrom}:{alt.start}-{alt.end}",
        total=len(pairs),
        kept=len(subset),
    )
    return subset
