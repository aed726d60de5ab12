"""GMT offset labels, e.g. for timezone pickers."""

from typing import List

# Whole-hour offsets, inclusive
MIN_OFFSET = -12
MAX_OFFSET = 13


def gmt_offsets() -> List[str]:
    """
    Labels for every whole-hour GMT offset from -12 to +13.

    Examples:
        >>> gmt_offsets()[:2]
        ['GMT -12:00', 'GMT -11:00']

        >>> gmt_offsets()[12]
        'GMT +00:00'
    """
    return [f"GMT {hours:+03d}:00" for hours in range(MIN_OFFSET, MAX_OFFSET + 1)]


class GMTZone:
    """Namespace kept for callers that expect ``GMTZone.offsets()``."""

    offsets = staticmethod(gmt_offsets)


__all__ = [
    "gmt_offsets",
    "GMTZone",
]
