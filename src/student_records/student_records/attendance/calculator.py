from __future__ import annotations


def calculate_percentage(present: int, total: int) -> int:
    """Whole-number share of ``present`` in ``total``, ties rounded up.

    No data (``total == 0``) counts as 0%, so it never looks healthy.
    Integer arithmetic keeps .5 boundaries exact (1/8 -> 13).
    """
    if total == 0:
        return 0
    percentage = (present * 200 + total) // (total * 2)
    return max(0, min(percentage, 100))
