from __future__ import annotations

"""
Request Capture Hooks.

Records the target of every response completed by a requests.Session
into a PathTree.
"""

import logging
from typing import Any, Callable

import requests

from pathtree.core.tree import PathTree
from pathtree.errors import InvalidTargetError

logger = logging.getLogger(__name__)

ResponseHook = Callable[..., Any]


def build_response_hook(tree: PathTree) -> ResponseHook:
    """
    Create a `requests` response hook that records each request target.

    The hook returns None so `requests` keeps the original response. Targets
    that cannot be split are logged and skipped.
    """
    def _record(response: requests.Response, *args: Any, **kwargs: Any) -> None:
        request = getattr(response, "request", None) or response
        try:
            tree.update(request)
        except InvalidTargetError as e:
            logger.warning(f"Skipping unrecordable request target: {e}")

    return _record


def record_session(session: requests.Session, tree: PathTree) -> ResponseHook:
    """Install a recording hook on the session and return it for detaching."""
    hook = build_response_hook(tree)
    session.hooks.setdefault("response", []).append(hook)
    logger.debug("Path tree recording enabled on session.")
    return hook


def detach_session(session: requests.Session, hook: ResponseHook) -> None:
    """Remove a hook previously installed by record_session."""
    hooks = session.hooks.get("response", [])
    if hook in hooks:
        hooks.remove(hook)
        logger.debug("Path tree recording disabled on session.")
