"""Genome assemblies and their chromosome naming conventions."""

from __future__ import annotations

from pydantic import BaseModel

# Assemblies whose chromosomes must be written with a "chr" prefix
_PREFIXED_ASSEMBLIES = ("hg19", "hg38", "mm9", "mm10")


class Assembly(BaseModel, frozen=True):
    """A genome assembly.

    Attributes:
        name: Assembly name (e.g. "hg19").
        chrom_prefix: Prefix every chromosome name must start with,
            or None when names are not checked.
    """

    name: str
    chrom_prefix: str | None = None

    @classmethod
    def from_name(cls, name: str) -> Assembly:
        """Look up a built-in assembly by name.

        Unknown assemblies are accepted without a naming convention.
        """
        prefix = "chr" if name in _PREFIXED_ASSEMBLIES else None
        return cls(name=name, chrom_prefix=prefix)
