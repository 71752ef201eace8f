"""Shared fixtures: small networks and a clean configuration per test."""

import pytest

from subway_fare.config import reset_config
from subway_fare.domain.models import Line, NetworkSnapshot, Section, Station


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def abc_network() -> NetworkSnapshot:
    """A - B - C, with B - C on a line carrying a 500 surcharge."""
    a, b, c = Station(1, "A"), Station(2, "B"), Station(3, "C")
    x = Line(1, "X", extra_fare=0)
    y = Line(2, "Y", extra_fare=500)
    return NetworkSnapshot(
        stations=(a, b, c),
        lines=(x, y),
        sections=(
            Section(a.id, b.id, distance=10, duration=10, line=x),
            Section(b.id, c.id, distance=10, duration=15, line=y),
        ),
    )


@pytest.fixture
def sample_network() -> NetworkSnapshot:
    """Two routes from Gyodae (1) to Yangjae (3).

    Via Gangnam (2): distance 20, duration 15, lines Line 2 + Sinbundang.
    Via Nambu (4): distance 5, duration 40, Line 3 only.
    """
    gyodae = Station(1, "Gyodae")
    gangnam = Station(2, "Gangnam")
    yangjae = Station(3, "Yangjae")
    nambu = Station(4, "Nambu Bus Terminal")
    green = Line(1, "Line 2", extra_fare=0)
    red = Line(2, "Sinbundang Line", extra_fare=900)
    orange = Line(3, "Line 3", extra_fare=500)
    return NetworkSnapshot(
        stations=(gyodae, gangnam, yangjae, nambu),
        lines=(green, red, orange),
        sections=(
            Section(1, 2, distance=10, duration=10, line=green),
            Section(2, 3, distance=10, duration=5, line=red),
            Section(1, 4, distance=2, duration=20, line=orange),
            Section(4, 3, distance=3, duration=20, line=orange),
        ),
    )
