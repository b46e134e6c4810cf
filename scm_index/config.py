"""Configuration constants for the index-based SCM plug-in."""

import os

# Service key shared by every SCM tool ("service:scm:svn", "service:scm:git", ...)
SERVICE_KEY = "service:scm"

# Credentials and server can also be supplied via SCM_URL / SCM_USER / SCM_PASSWORD
DEFAULT_URL = os.environ.get("SCM_URL", "")
DEFAULT_USER = os.environ.get("SCM_USER", "")
DEFAULT_PASSWORD = os.environ.get("SCM_PASSWORD", "")
DEFAULT_KEY = SERVICE_KEY + ":svn"
DEFAULT_NAME = "svn"

REQUEST_TIMEOUT = 15    # seconds per HTTP request
PAGE_SIZE       = 10    # entries returned by a name search

# Only URLs with this prefix can be checked for an administrative listing
HTTP_PREFIX = "http"

# Marker splitting an index listing into one fragment per directory entry
INDEX_ANCHOR = '<a href="'

# A root listing links back to "/" only when the caller can browse the
# whole server, not just a single repository
ROOT_ANCHOR = '<a href="/">'

USER_AGENT = "scm-index/1.0 (+python-requests)"
