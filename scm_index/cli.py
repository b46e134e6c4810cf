"""
Command-line interface for the index-based SCM checks.

Runs one operation against a server given on the command line and prints
the result as JSON on stdout.  Validation failures are printed in the same
shape a client receives them and exit with status 1.
"""

import argparse
import dataclasses
import getpass
import json
import sys

from scm_index.config import (
    DEFAULT_KEY,
    DEFAULT_NAME,
    DEFAULT_PASSWORD,
    DEFAULT_URL,
    DEFAULT_USER,
    REQUEST_TIMEOUT,
)
from scm_index.errors import ValidationError
from scm_index.extraction.status import revision_from_index
from scm_index.logging_setup import _setup_logging, log
from scm_index.network.client import HttpProbe
from scm_index.params import ParameterNamespace, StaticParameterResolver
from scm_index.resource import IndexBasedPluginResource
from scm_index.utils.url import build_repository_url, with_trailing_slash

_CLI_SUBSCRIPTION = 0
_CLI_NODE = "cli"


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="scm-index",
        description="Validate and search SCM repositories exposed through "
                    "an HTTP directory index.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "URL, user and password can also be provided via the SCM_URL,\n"
            "SCM_USER and SCM_PASSWORD env vars.  When a user is given without\n"
            "a password, you will be prompted for it."
        ),
    )
    parser.add_argument(
        "--url", default=DEFAULT_URL,
        help="Base server URL, e.g. https://svn.example.com",
    )
    parser.add_argument(
        "--repository", default="",
        help="Repository path fragment appended to the server URL",
    )
    parser.add_argument("--user", default=DEFAULT_USER, help="User name (default: anonymous)")
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Password (overrides SCM_PASSWORD env var)",
    )
    parser.add_argument(
        "--index", action="store_true", default=False,
        help="The server root is an index: also check administrative access",
    )
    parser.add_argument(
        "--key", default=DEFAULT_KEY,
        help=f"Plug-in key prefixing the parameter names (default: {DEFAULT_KEY})",
    )
    parser.add_argument(
        "--name", default=DEFAULT_NAME,
        help=f"Short tool name used in validation rules (default: {DEFAULT_NAME})",
    )
    parser.add_argument(
        "--trailing-slash", action="store_true", default=False,
        help="Request the repository URL as a directory (ending with '/')",
    )
    parser.add_argument(
        "--revision", action="store_true", default=False,
        help="Report the Subversion revision instead of the raw index page",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("status", help="Check the server, and its admin access with --index")
    commands.add_parser("subscription-status", help="Check the repository and report its data")
    commands.add_parser("link", help="Check the repository can be linked")
    search = commands.add_parser("search", help="List root repositories matching a name")
    search.add_argument("criteria", help="Part of the repository name")
    return parser.parse_args(argv)


def build_parameters(args: argparse.Namespace) -> dict[str, str]:
    """Map the command-line options to the plug-in parameter names."""
    names = ParameterNamespace(args.key)
    return {
        names.url: args.url,
        names.repository: args.repository,
        names.user: args.user,
        names.password: args.password,
        names.index: "true" if args.index else "false",
    }


def build_resource(args: argparse.Namespace, parameters: dict[str, str]) -> IndexBasedPluginResource:
    resolver = StaticParameterResolver({_CLI_SUBSCRIPTION: parameters}, {_CLI_NODE: parameters})
    kwargs = {}
    if args.revision:
        kwargs["to_data"] = revision_from_index
    return IndexBasedPluginResource(
        args.key,
        args.name,
        resolver=resolver,
        probe=HttpProbe(timeout=args.timeout, verify_ssl=args.verify_ssl),
        repository_url=with_trailing_slash() if args.trailing_slash else build_repository_url,
        **kwargs,
    )


def run(args: argparse.Namespace, resource: IndexBasedPluginResource, parameters: dict[str, str]):
    """Execute the selected command and return a JSON-serialisable result."""
    if args.command == "status":
        return {"status": resource.check_status(parameters)}
    if args.command == "subscription-status":
        return dataclasses.asdict(resource.check_subscription_status(parameters))
    if args.command == "link":
        resource.link(_CLI_SUBSCRIPTION)
        return {"linked": resource.get_repository_url(parameters)}
    return [dataclasses.asdict(e) for e in resource.find_all_by_name(_CLI_NODE, args.criteria)]


def main(argv=None) -> int:
    """
    Main entry point for the scm-index CLI.
    """
    args = parse_args(argv)

    _setup_logging(debug=args.debug)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    if args.user and not args.password:
        args.password = getpass.getpass(f"Password for {args.user}: ")

    parameters = build_parameters(args)
    resource = build_resource(args, parameters)
    try:
        result = run(args, resource, parameters)
    except ValidationError as exc:
        log.error("Validation failed: %s", exc)
        json.dump(exc.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
