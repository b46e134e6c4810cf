"""Validation errors raised when a repository or server check fails."""

from __future__ import annotations


class ValidationError(Exception):
    """
    A parameter failed a remote check.

    Attributes:
        parameter: the faulted parameter key, e.g. "service:scm:svn:url"
        rule:      symbolic rule name, e.g. "svn-admin"
        value:     the value reported to the user for diagnostics
    """

    def __init__(self, parameter: str, rule: str, value: str | None = None) -> None:
        super().__init__(f"{parameter}: {rule} ({value!r})")
        self.parameter = parameter
        self.rule = rule
        self.value = value

    def to_dict(self) -> dict:
        """Client-facing shape: errors grouped by the faulted parameter."""
        return {"errors": {self.parameter: [{"rule": self.rule, "parameters": self.value}]}}


class RepositoryUnreachable(ValidationError):
    """The repository URL could not be read with the given credentials."""


class AdminAccessDenied(ValidationError):
    """The server root could not be listed, so administrative access is not granted."""
