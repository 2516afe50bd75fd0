from __future__ import annotations

import pytest

from reibun.logging_utils import set_debug_logging


@pytest.fixture(autouse=True)
def _reset_debug_logging():
    yield
    set_debug_logging(False)
