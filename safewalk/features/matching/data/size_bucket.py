import math
from enum import Enum
from typing import NamedTuple, Optional

from safewalk.core.common.enums import CommonSize, SizeUnit
from safewalk.core.config.settings import settings

class Edge(str, Enum):
    LOWER = "lower"
    UPPER = "upper"

class ByteRange(NamedTuple):
    """Inclusive byte bounds. `upper` is None for open-ended ranges."""
    lower: int
    upper: Optional[int]

    def contains(self, length: int) -> bool:
        if length < self.lower:
            return False
        return self.upper is None or length <= self.upper

def to_byte_count(quantity: float, unit: SizeUnit, edge: Edge) -> Optional[int]:
    """
    Converts one edge of a fuzzy size window to bytes.

    The window is one unit wide on each side of `quantity` so that sizes
    reported with rounding ("about 5 MB") still match. A quantity of 0 is
    read as 1 to avoid a zero-width window.

    Returns None when the result is not a usable byte count.
    """
    if quantity == 0:
        quantity = 1
    try:
        scale = math.pow(1024, SizeUnit(unit).value)
        if edge == Edge.LOWER:
            result = math.floor((quantity - 1) * scale)
        else:
            result = math.ceil((quantity + 1) * scale)
    except (OverflowError, ValueError, TypeError):
        return None

    if result >= settings.MAX_BYTE_COUNT:
        return None
    return int(result)

def size_window(quantity: float, unit: SizeUnit) -> Optional[ByteRange]:
    lower = to_byte_count(quantity, unit, Edge.LOWER)
    upper = to_byte_count(quantity, unit, Edge.UPPER)
    if lower is None or upper is None or lower < 0 or upper < 0:
        return None
    return ByteRange(lower, upper)

def range_window(lower: float, upper: float, unit: SizeUnit) -> Optional[ByteRange]:
    """
    Window for 'more than `lower`, up to `upper`' units.
    `lower` is bumped by one before conversion, which is what makes the
    bottom of the range exclusive.
    """
    lower += 1
    if lower < 0 or upper < 0 or lower >= upper:
        return None

    lower_bytes = to_byte_count(lower, unit, Edge.LOWER)
    upper_bytes = to_byte_count(upper, unit, Edge.UPPER)
    if lower_bytes is None or upper_bytes is None or lower_bytes < 0 or upper_bytes < 0:
        return None
    return ByteRange(lower_bytes, upper_bytes)

def _gigantic_window() -> ByteRange:
    # Open-ended catch-all: strictly above the lower edge of 129 MB
    return ByteRange(to_byte_count(129, SizeUnit.MEGABYTES, Edge.LOWER) + 1, None)

COMMON_SIZE_RANGES = {
    CommonSize.EMPTY: ByteRange(0, 0),
    CommonSize.TINY: range_window(1, 10, SizeUnit.KILOBYTES),
    CommonSize.SMALL: range_window(11, 100, SizeUnit.KILOBYTES),
    CommonSize.MEDIUM: range_window(101, 1000, SizeUnit.KILOBYTES),
    CommonSize.LARGE: range_window(2, 16, SizeUnit.MEGABYTES),
    CommonSize.HUGE: range_window(17, 128, SizeUnit.MEGABYTES),
    CommonSize.GIGANTIC: _gigantic_window(),
}

def common_size_window(common_size: CommonSize) -> ByteRange:
    return COMMON_SIZE_RANGES[CommonSize(common_size)]
