"""Utilities submodule – URL composition and text normalisation."""

from scm_index.utils.text import normalize
from scm_index.utils.url import (
    append_if_missing,
    build_repository_url,
    with_trailing_slash,
)

__all__ = [
    "normalize",
    "append_if_missing",
    "build_repository_url",
    "with_trailing_slash",
]
