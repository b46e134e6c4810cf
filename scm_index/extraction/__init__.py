"""Extraction submodule – directory entries and status data from index pages."""

from scm_index.extraction.index_parser import parse_entries
from scm_index.extraction.status import revision_from_index

__all__ = ["parse_entries", "revision_from_index"]
