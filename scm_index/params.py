"""
Parameter names and parameter resolution.

Every tool plugged on the SCM service stores its configuration under keys
prefixed by its plug-in key, e.g. for "service:scm:svn":

    service:scm:svn:url         base server URL
    service:scm:svn:repository  repository path fragment
    service:scm:svn:user        user name (optional)
    service:scm:svn:password    password (optional)
    service:scm:svn:index       "true" when the server root can be listed

Storing and loading those values is not done here: a resolver is handed in
by the caller and only read from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .config import SERVICE_KEY


def tool_key(tool: str) -> str:
    """Return the plug-in key of an SCM *tool*: tool_key("git") == "service:scm:git"."""
    return f"{SERVICE_KEY}:{tool}"


@dataclass(frozen=True)
class ParameterNamespace:
    """Parameter key names derived once from a plug-in key."""

    key: str
    url: str = field(init=False)
    repository: str = field(init=False)
    user: str = field(init=False)
    password: str = field(init=False)
    index: str = field(init=False)

    def __post_init__(self) -> None:
        # frozen dataclass: derived fields are set through object.__setattr__
        for name in ("url", "repository", "user", "password", "index"):
            object.__setattr__(self, name, f"{self.key}:{name}")


class ParameterResolver(Protocol):
    """Read access to stored parameter values."""

    def get_parameters(self, subscription: int) -> Mapping[str, str]:
        """Parameters of a subscription, node parameters included."""
        ...

    def get_node_parameters(self, node: str) -> Mapping[str, str]:
        """Parameters attached to a node only."""
        ...


class StaticParameterResolver:
    """In-memory resolver, used by the command line and in tests."""

    def __init__(
        self,
        subscriptions: Mapping[int, Mapping[str, str]] | None = None,
        nodes: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._subscriptions = dict(subscriptions or {})
        self._nodes = dict(nodes or {})

    def get_parameters(self, subscription: int) -> Mapping[str, str]:
        return self._subscriptions.get(subscription, {})

    def get_node_parameters(self, node: str) -> Mapping[str, str]:
        return self._nodes.get(node, {})
