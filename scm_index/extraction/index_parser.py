"""Directory entry extraction from raw index listings."""

from ..config import INDEX_ANCHOR


def parse_entries(html: str | None) -> list[str]:
    """
    Return the anchor targets of an index listing, in page order.

    Listings produced by SCM web front-ends are frequently not well-formed,
    so this is plain substring scraping rather than a DOM parse:

      * split on '<a href="' and drop what precedes the first anchor,
      * keep each fragment up to its closing '"' (no quote → nothing),
      * strip one trailing '/', then drop empty results.

    '<a href="trunk/">' yields "trunk"; '<a href="/">' yields nothing.
    Duplicates are kept.  Any input, even garbage, returns a list.
    """
    if not html:
        return []

    entries: list[str] = []
    for fragment in html.split(INDEX_ANCHOR)[1:]:
        end = fragment.find('"')
        target = fragment[:end] if end >= 0 else ""
        if target.endswith("/"):
            target = target[:-1]
        if target:
            entries.append(target)
    return entries
