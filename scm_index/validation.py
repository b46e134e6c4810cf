"""
Repository and administrative access validation.

Two independent checks, both raising on failure:

  * repository – the repository URL answers with the given credentials;
  * admin      – the server root answers AND its listing links to "/",
                 which only a user allowed to browse the whole server sees.

The admin check is gated: it runs only for HTTP(S) URLs whose index flag is
the literal string "true".  Other URL schemes cannot be probed this way and
are accepted as they are.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping

from .config import HTTP_PREFIX, ROOT_ANCHOR
from .errors import AdminAccessDenied, RepositoryUnreachable
from .logging_setup import log
from .network.client import HttpProbe, ProbeResult
from .params import ParameterNamespace
from .utils.url import RepositoryUrlBuilder, append_if_missing, build_repository_url


class AccessCheck(enum.Enum):
    """Terminal states of a successful access check; failure raises instead."""

    SKIPPED = "skipped"
    PASSED = "passed"


def probe_with(
    probe: HttpProbe,
    names: ParameterNamespace,
    parameters: Mapping[str, str],
    url: str,
) -> ProbeResult:
    """GET *url* with the user/password found in *parameters*."""
    return probe.probe(url, parameters.get(names.user), parameters.get(names.password))


def has_index(names: ParameterNamespace, parameters: Mapping[str, str]) -> bool:
    """Only the exact text "true" enables the flag; "True" or "1" do not."""
    return parameters.get(names.index, "false") == "true"


def validate_repository(
    names: ParameterNamespace,
    simple_name: str,
    parameters: Mapping[str, str],
    probe: HttpProbe,
    repository_url: RepositoryUrlBuilder = build_repository_url,
) -> str | None:
    """
    Check the repository exists and return the content of its index page.

    Raises:
        RepositoryUnreachable: the repository URL could not be read.
    """
    url = repository_url(names, parameters)
    result = probe_with(probe, names, parameters, url)
    if not result.reachable:
        log.warning("Repository %s is not reachable", url)
        raise RepositoryUnreachable(
            names.repository, f"{simple_name}-repository", parameters.get(names.repository)
        )
    return result.body


def validate_admin_access(
    names: ParameterNamespace,
    simple_name: str,
    parameters: Mapping[str, str],
    probe: HttpProbe,
) -> None:
    """
    Check the server root can be listed with the given credentials.

    Raises:
        AdminAccessDenied: the root could not be read, or it is not a full
            listing (no link to "/").
    """
    url = append_if_missing(parameters.get(names.url), "/")
    result = probe_with(probe, names, parameters, url)
    if not result.reachable or ROOT_ANCHOR not in (result.body or ""):
        log.warning(
            "No administrative listing at %s for user %r (reachable=%s)",
            url, parameters.get(names.user), result.reachable,
        )
        raise AdminAccessDenied(names.url, f"{simple_name}-admin", parameters.get(names.user))


def validate_access(
    names: ParameterNamespace,
    simple_name: str,
    parameters: Mapping[str, str],
    probe: HttpProbe,
) -> AccessCheck:
    """Run the admin check when the URL and the index flag allow it."""
    url = parameters.get(names.url) or ""
    if not (url.startswith(HTTP_PREFIX) and has_index(names, parameters)):
        log.debug("Administrative check skipped for %r", url)
        return AccessCheck.SKIPPED
    validate_admin_access(names, simple_name, parameters, probe)
    return AccessCheck.PASSED
