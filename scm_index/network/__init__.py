"""Network submodule – HTTP session setup and the authenticated probe."""

from scm_index.network.client import HttpProbe, ProbeResult, build_session

__all__ = ["HttpProbe", "ProbeResult", "build_session"]
