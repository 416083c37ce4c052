# services/rounding.py

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    0.5 を常に切り上げる丸め。
    Python 組み込みの round() は偶数丸めなので使わない。
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
