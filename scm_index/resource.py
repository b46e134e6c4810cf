"""
Index-based SCM plug-in resource.

The operations exposed to the subscription layer for any SCM tool whose
server publishes a plain HTML directory listing (Subversion over Apache,
gitweb-less git over HTTP, ...).  A tool is configured by composition:

    svn = IndexBasedPluginResource(
        tool_key("svn"), "svn",
        resolver=my_resolver,
        repository_url=with_trailing_slash(),
        to_data=revision_from_index,
    )
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .discovery import IndexEntry, find_all_by_name
from .logging_setup import log
from .network.client import HttpProbe
from .pagination import InMemoryPagination
from .params import ParameterNamespace, ParameterResolver
from .utils.url import RepositoryUrlBuilder, build_repository_url
from .validation import validate_access, validate_repository


def _identity(content: str | None) -> Any:
    return content


@dataclass
class SubscriptionStatusWithData:
    """Subscription status along with tool specific data under "info"."""

    status: str = "up"
    data: dict[str, Any] = field(default_factory=dict)

    def put(self, name: str, value: Any) -> None:
        self.data[name] = value

    @property
    def is_up(self) -> bool:
        return self.status == "up"


class IndexBasedPluginResource:
    """
    Validation and discovery of repositories exposed through an HTML index.

    All collaborators are fixed at construction and never reassigned, so a
    single instance can serve concurrent callers.
    """

    def __init__(
        self,
        key: str,
        simple_name: str,
        *,
        resolver: ParameterResolver,
        probe: HttpProbe | None = None,
        pagination: InMemoryPagination | None = None,
        repository_url: RepositoryUrlBuilder = build_repository_url,
        to_data: Callable[[str | None], Any] = _identity,
    ) -> None:
        """
        Args:
            key:            plug-in key, prefix of every parameter name
            simple_name:    short tool name used in validation rule names
            resolver:       source of subscription and node parameters
            probe:          HTTP probe, a default HttpProbe when omitted
            pagination:     result pagination, in memory when omitted
            repository_url: builds the repository URL from the parameters
            to_data:        maps the repository index page to status data
        """
        self._key = key
        self._simple_name = simple_name
        self._names = ParameterNamespace(key)
        self._resolver = resolver
        self._probe = probe or HttpProbe()
        self._pagination = pagination or InMemoryPagination()
        self._repository_url = repository_url
        self._to_data = to_data

    @property
    def simple_name(self) -> str:
        return self._simple_name

    @property
    def names(self) -> ParameterNamespace:
        return self._names

    @property
    def probe(self) -> HttpProbe:
        return self._probe

    def get_key(self) -> str:
        return self._key

    def get_last_version(self) -> str | None:
        """Index-based tools publish no version."""
        return None

    def get_repository_url(self, parameters: Mapping[str, str]) -> str:
        return self._repository_url(self._names, parameters)

    def validate_repository(self, parameters: Mapping[str, str]) -> str | None:
        """Return the repository index page, or raise RepositoryUnreachable."""
        return validate_repository(
            self._names, self._simple_name, parameters, self._probe, self._repository_url
        )

    def link(self, subscription: int) -> None:
        """Attach an existing repository: only the repository is validated."""
        log.info("Linking subscription %s to %s", subscription, self._key)
        self.validate_repository(self._resolver.get_parameters(subscription))

    def find_all_by_name(self, node: str, criteria: str) -> list[IndexEntry]:
        """Repositories of *node* whose name contains *criteria* (first page only)."""
        return find_all_by_name(
            self._names,
            self._resolver.get_node_parameters(node),
            criteria,
            self._probe,
            self._pagination,
        )

    def check_status(self, parameters: Mapping[str, str]) -> bool:
        """
        The node is up when its administrative access is up, if checkable.

        Raises:
            AdminAccessDenied: the admin check ran and failed.
        """
        validate_access(self._names, self._simple_name, parameters, self._probe)
        return True

    def check_subscription_status(self, parameters: Mapping[str, str]) -> SubscriptionStatusWithData:
        """
        Validate the repository and expose ``to_data(index page)`` as "info".

        Raises:
            RepositoryUnreachable: the repository could not be read.
        """
        status = SubscriptionStatusWithData()
        status.put("info", self.to_data(self.validate_repository(parameters)))
        return status

    def to_data(self, status_content: str | None) -> Any:
        """Data completing the subscription status; the page as is by default."""
        return self._to_data(status_content)
