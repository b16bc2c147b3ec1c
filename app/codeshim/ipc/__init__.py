"""IPC socket discovery and cleanup.

This module provides the naming convention check, liveness probing, and
hint resolution for the editor's command-line IPC sockets.
"""

from codeshim.ipc.naming import ENDPOINT_PREFIX, ENDPOINT_SUFFIX, looks_like_endpoint
from codeshim.ipc.probe import ProbeOutcome, ProbeResult, probe, probe_and_clean
from codeshim.ipc.resolver import resolve_and_clean

__all__ = [
    "ENDPOINT_PREFIX",
    "ENDPOINT_SUFFIX",
    "ProbeOutcome",
    "ProbeResult",
    "looks_like_endpoint",
    "probe",
    "probe_and_clean",
    "resolve_and_clean",
]
