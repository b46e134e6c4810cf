"""Repository URL composition."""

from collections.abc import Callable, Mapping

from ..params import ParameterNamespace

RepositoryUrlBuilder = Callable[[ParameterNamespace, Mapping[str, str]], str]


def append_if_missing(value: str | None, suffix: str) -> str:
    """
    Return *value* ending with *suffix*, appending it only when absent.

    A missing value is read as an empty string, so the result is never None:
    append_if_missing(None, "/") == "/".
    """
    value = value or ""
    return value if value.endswith(suffix) else value + suffix


def build_repository_url(names: ParameterNamespace, parameters: Mapping[str, str]) -> str:
    """
    Base server URL with exactly one separating slash, followed by the
    repository fragment as given.

    http://host      + my-repo → http://host/my-repo
    http://host/     + my-repo → http://host/my-repo
    """
    return append_if_missing(parameters.get(names.url), "/") + (parameters.get(names.repository) or "")


def with_trailing_slash(builder: RepositoryUrlBuilder = build_repository_url) -> RepositoryUrlBuilder:
    """
    Wrap *builder* so the repository URL always ends with "/".

    Servers such as Apache mod_dav_svn only list a repository when its URL
    is requested as a directory.
    """
    def _builder(names: ParameterNamespace, parameters: Mapping[str, str]) -> str:
        return append_if_missing(builder(names, parameters), "/")

    return _builder
