from __future__ import annotations

"""
Network Capture Infrastructure.

Feeds HTTP traffic issued through `requests` into a PathTree.
"""

from pathtree.infra.network.capture import (
    build_response_hook,
    detach_session,
    record_session,
)

__all__ = [
    "build_response_hook",
    "record_session",
    "detach_session",
]
