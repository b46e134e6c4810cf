"""
scm_index
=========
Validation and discovery of SCM repositories published through a plain
HTTP directory index (the listing pages generated by Apache mod_dav_svn,
autoindex and similar front-ends).

Package structure
-----------------
scm_index/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── logging_setup.py  – stderr logger, coloured with colorlog when present
├── params.py         – parameter key names and parameter resolvers
├── errors.py         – RepositoryUnreachable / AdminAccessDenied
├── pagination.py     – in-memory result pages
├── validation.py     – repository and administrative access checks
├── discovery.py      – repository search in the server root listing
├── resource.py       – IndexBasedPluginResource, the public operations
├── cli.py            – argparse CLI (``python -m scm_index``)
├── network/          – requests session and the authenticated probe
├── extraction/       – index entries and status data from index pages
└── utils/            – URL composition and name normalisation

Quick start
-----------
    from scm_index import IndexBasedPluginResource, StaticParameterResolver, tool_key

    params = {
        "service:scm:svn:url": "https://svn.example.com",
        "service:scm:svn:repository": "my-repo",
    }
    svn = IndexBasedPluginResource(
        tool_key("svn"), "svn",
        resolver=StaticParameterResolver({1: params}, {"service:scm:svn:node": params}),
    )
    svn.link(1)
    svn.find_all_by_name("service:scm:svn:node", "repo")
"""

from .discovery  import IndexEntry
from .errors     import AdminAccessDenied, RepositoryUnreachable, ValidationError
from .extraction import parse_entries, revision_from_index
from .network    import HttpProbe, ProbeResult
from .params     import ParameterNamespace, StaticParameterResolver, tool_key
from .resource   import IndexBasedPluginResource, SubscriptionStatusWithData
from .utils      import build_repository_url, normalize, with_trailing_slash

__all__ = [
    "IndexBasedPluginResource",
    "SubscriptionStatusWithData",
    "IndexEntry",
    "ValidationError",
    "RepositoryUnreachable",
    "AdminAccessDenied",
    "HttpProbe",
    "ProbeResult",
    "ParameterNamespace",
    "StaticParameterResolver",
    "tool_key",
    "parse_entries",
    "revision_from_index",
    "normalize",
    "build_repository_url",
    "with_trailing_slash",
]
