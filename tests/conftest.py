import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import zonepack
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from zonepack.decoding import decode  # noqa: E402

HOUR = 3_600_000

# STD (UTC+01:00) and DST (UTC+02:00) alternating, transitions one hour apart:
# [-inf, 1h) STD, [1h, 2h) DST, [2h, 3h) STD, [3h, +inf) DST
ALTERNATING_PACKED = "Test/Zone|STD DST|-1 -2|0101|1 1 1"


# Common test fixtures
@pytest.fixture
def alternating_packed() -> str:
    """Return a well-formed packed zone with three transitions."""
    return ALTERNATING_PACKED


@pytest.fixture
def alternating_zone():
    """Decoded ALTERNATING_PACKED."""
    return decode(ALTERNATING_PACKED)


@pytest.fixture
def fixed_zone():
    """A zone with no transitions at all."""
    return decode("Etc/Fixed|FIX|-1|0|")
