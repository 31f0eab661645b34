from datetime import datetime, timezone

import pytest

# 2024-03-01 was a Friday.
FIXED_NOW = datetime(2024, 3, 1, 15, 42, 7, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW
