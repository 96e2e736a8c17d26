from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and clean shutdown.
"""

import logging
from pathlib import Path

import pytest

from pathtree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)

pytestmark = pytest.mark.usefixtures("reset_logging")


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures_level() -> None:
    """TC-02: force=True replaces handlers and applies the new level."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO


def test_log_file_receives_records(tmp_path: Path) -> None:
    """TC-03: Records reach the rotating file once the listener is flushed."""
    log_file = tmp_path / "logs" / "pathtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("pathtree.test").info("recorded target")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "recorded target" in content
    assert "pathtree.test" in content


def test_log_rotation(tmp_path: Path) -> None:
    """TC-04: File rotation happens when the size limit is exceeded."""
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    ))

    logger = logging.getLogger("pathtree.rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_no_handlers_leaves_root_unconfigured() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []
    assert not getattr(logging.getLogger(), _CONFIGURED_FLAG_ATTR, False)


def test_shutdown_detaches_everything() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is not None

    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)
