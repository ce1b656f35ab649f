import pytest
from unittest.mock import patch

from ethcal.core.types import EthiopianDate


@pytest.fixture
def pin_today():
    """
    Pin ethcal's notion of "now" to a given Ethiopian date, bypassing the
    system clock.
    """
    patchers = []

    def _pin(year: int, month: int, day: int) -> EthiopianDate:
        today = EthiopianDate(year, month, day)
        p = patch("ethcal.engines.ethiopian.now", return_value=today)
        p.start()
        patchers.append(p)
        return today

    yield _pin
    for p in patchers:
        p.stop()
