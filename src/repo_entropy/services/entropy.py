"""Shannon entropy over a file-extension histogram."""

from __future__ import annotations

import math
from typing import Mapping


def calculate_entropy(file_types: Mapping[str, int]) -> float:
    """Return the entropy in bits of the distribution implied by *file_types*.

    An empty histogram (or one whose counts sum to zero) has entropy 0.0.
    ``k`` equally frequent extensions give ``log2(k)``.
    """
    total = sum(file_types.values())
    if total <= 0:
        return 0.0

    entropy = 0.0
    for count in file_types.values():
        if count > 0:
            p = count / total
            entropy -= p * math.log2(p)
    return entropy
