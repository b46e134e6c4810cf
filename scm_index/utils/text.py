"""Text normalisation used for case- and accent-insensitive name matching."""

import re
import unicodedata

# Anything that is neither a letter nor a digit (underscore included)
_SEPARATOR_RE = re.compile(r"[\W_]+")


def normalize(value: str | None) -> str:
    """
    Return the canonical comparable form of *value*.

    "Évènement_Déjà" → "evenement deja"
    "has-event/"     → "has event "

    Case is folded, diacritics are dropped and every run of separators
    (punctuation, whitespace, underscore) collapses into a single space.
    Leading/trailing separators are kept as one space so that a criterion
    such as "has-" still only matches names where "has" is followed by a
    separator.  Applying the function twice yields the same string.
    """
    if not value:
        return ""
    folded = unicodedata.normalize("NFKD", value.casefold())
    stripped = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return _SEPARATOR_RE.sub(" ", stripped.casefold())
