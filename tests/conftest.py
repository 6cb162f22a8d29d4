import logging
import os
from collections.abc import Iterator
from typing import Any

import pytest

from tokiparse.tokiparse_constants import ALIASES_ENV_VAR

# Monkeypatch coverage to bypass teardown crash in act/docker
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()

    # Nukes the teardown assertion that fails in act
    import coverage.collector

    def safe_stop(self: Any) -> None:
        if self in getattr(self, "_collectors", []):
            self._collectors.remove(self)

    coverage.collector.Collector.stop = safe_stop


@pytest.fixture(autouse=True)  # type: ignore[misc]
def no_alias_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ALIASES_ENV_VAR, raising=False)


@pytest.fixture  # type: ignore[misc]
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
