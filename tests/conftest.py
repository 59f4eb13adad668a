"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories, plus a frozen clock.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime

import pytest

from daytasks.utils.clock import FixedClock

# Wednesday, day index 3
WEDNESDAY = datetime(2026, 10, 14, 15, 30)


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path, monkeypatch):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import daytasks.utils.logger as logger_mod
    from daytasks.services.config_service import get_config_service

    def _dir(kind):
        return lambda *args, **kwargs: str(tmp_path / kind)

    monkeypatch.setattr("daytasks.services.config_service.user_config_dir", _dir("config"))
    monkeypatch.setattr("daytasks.services.config_service.user_data_dir", _dir("data"))
    monkeypatch.setattr("daytasks.utils.logger.user_log_dir", _dir("logs"))

    logger_mod._logger = None
    get_config_service.cache_clear()

    yield

    app_logger = logging.getLogger("daytasks")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            app_logger.removeHandler(handler)
    logger_mod._logger = None
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Clock & logging helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> FixedClock:
    """Clock frozen on a Wednesday afternoon."""
    return FixedClock(WEDNESDAY)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def log_records():
    """Collect every record emitted through the application logger."""
    from daytasks.utils.logger import get_logger

    handler = _ListHandler()
    logger = get_logger()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)


@pytest.fixture()
def config_service():
    """A real ConfigService living in the isolated tmp directories."""
    from daytasks.services.config_service import get_config_service

    return get_config_service()
