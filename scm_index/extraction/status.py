"""Status data extraction from a repository index page."""

import re

from bs4 import BeautifulSoup

try:
    import lxml  # noqa: F401 – used as BeautifulSoup parser backend
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"

# mod_dav_svn titles a listing "<repository> - Revision <n>: <path>"
_REVISION_RE = re.compile(r"\bRevision\s+(\d+)\b", re.IGNORECASE)


def revision_from_index(body: str | None) -> int | None:
    """
    Extract the revision number shown by a Subversion index page.

    Looks at the <title> first, then at the first heading, since some
    front-ends customise only one of them.  Returns None when the page
    carries no revision.
    """
    if not body:
        return None

    soup = BeautifulSoup(body, _BS4_PARSER)
    for tag in (soup.title, soup.find("h2"), soup.find("h1")):
        if tag is None:
            continue
        m = _REVISION_RE.search(tag.get_text(" ", strip=True))
        if m:
            return int(m.group(1))
    return None
