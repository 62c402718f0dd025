"""Pin the local zone to UTC so local reads are deterministic."""

from datetime import timezone

import pytest

from datecalc.instant import TIMEZONE_ENV, set_local_timezone


@pytest.fixture(autouse=True)
def utc_local_zone(monkeypatch):
    monkeypatch.delenv(TIMEZONE_ENV, raising=False)
    set_local_timezone(timezone.utc)
    yield
    set_local_timezone(None)
