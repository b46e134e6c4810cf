"""Repository discovery from the server root listing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .config import PAGE_SIZE
from .extraction.index_parser import parse_entries
from .logging_setup import log
from .network.client import HttpProbe
from .pagination import InMemoryPagination
from .params import ParameterNamespace
from .utils.text import normalize
from .utils.url import append_if_missing
from .validation import probe_with


@dataclass(frozen=True)
class IndexEntry:
    """A repository found in a listing; both fields hold the entry name."""

    id: str
    name: str


def find_all_by_name(
    names: ParameterNamespace,
    parameters: Mapping[str, str],
    criteria: str,
    probe: HttpProbe,
    pagination: InMemoryPagination,
) -> list[IndexEntry]:
    """
    Return the first PAGE_SIZE root entries whose name contains *criteria*.

    Matching ignores case, accents and punctuation differences.  A root that
    cannot be read simply lists nothing: no match is a normal search result.
    """
    url = append_if_missing(parameters.get(names.url), "/")
    result = probe_with(probe, names, parameters, url)
    entries = parse_entries(result.body)

    wanted = normalize(criteria)
    matches = [IndexEntry(entry, entry) for entry in entries if wanted in normalize(entry)]
    log.debug(
        "Search %r on %s: %d entries, %d matching", criteria, url, len(entries), len(matches)
    )
    return pagination.new_page(matches, 0, PAGE_SIZE).content
