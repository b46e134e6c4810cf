"""Logging configuration for the index-based SCM plug-in.

Log records always go to stderr: the CLI reserves stdout for JSON results.
"""

import logging
import sys

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("scm-index")

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}


def _setup_logging(debug: bool = False, stream=None) -> None:
    """Attach a single stderr handler to the ``scm-index`` logger.

    With *debug* the ``urllib3`` connection log is also turned up so each
    probe shows the request line and the status returned by the server.
    """
    level = logging.DEBUG if debug else logging.INFO
    stream = stream or sys.stderr
    log.setLevel(level)
    log.handlers.clear()
    log.propagate = False

    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(stream)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s:%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors=_LOG_COLORS,
        ))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    log.addHandler(handler)

    urllib3_log = logging.getLogger("urllib3")
    urllib3_log.setLevel(logging.DEBUG if debug else logging.WARNING)
    urllib3_log.handlers.clear()
    if debug:
        urllib3_log.addHandler(handler)
