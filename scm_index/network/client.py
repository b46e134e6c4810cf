"""
HTTP client used to probe repository and server index pages.

Provides session setup and a single-shot authenticated GET that reports
whether the page could be read, along with its body.
"""

from __future__ import annotations

from dataclasses import dataclass

import requests
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth
from urllib3.exceptions import LocationValueError
from urllib3.util.retry import Retry

from ..config import REQUEST_TIMEOUT, USER_AGENT
from ..logging_setup import log


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session that never retries on its own.

    Args:
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    # One attempt per probe; retrying is left to the caller
    adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
    })
    return session


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a probe: body is only set when the page was read."""

    reachable: bool
    body: str | None = None


class HttpProbe:
    """
    GET a URL anonymously or with HTTP basic credentials.

    The probe keeps no connection state between calls: each call builds and
    closes its own session, so one instance can be shared by concurrent
    callers.
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, verify_ssl: bool = True) -> None:
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    def probe(self, url: str, user: str | None = None, password: str | None = None) -> ProbeResult:
        """
        GET *url* and report whether a 2xx response was received.

        An empty *user* means anonymous access.  The password is trimmed of
        surrounding whitespace, the user name is sent as given.
        """
        auth = HTTPBasicAuth(user, (password or "").strip()) if user else None
        with build_session(self.verify_ssl) as session:
            try:
                resp = session.get(url, auth=auth, timeout=self.timeout)
            except (requests.RequestException, LocationValueError) as exc:
                log.debug("GET %s failed: %s", url, exc)
                return ProbeResult(reachable=False)

        if not 200 <= resp.status_code < 300:
            log.debug("GET %s → HTTP %s", url, resp.status_code)
            return ProbeResult(reachable=False)

        # Pages without a declared charset are decoded as UTF-8
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = "utf-8"
        log.debug("GET %s → HTTP %s (%d bytes)", url, resp.status_code, len(resp.content))
        return ProbeResult(reachable=True, body=resp.text)
