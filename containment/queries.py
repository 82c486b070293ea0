from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, init=False)
class Subsequence:
    """Asks a sequence whether ``items`` occur in it as one contiguous run,
    rather than whether the sequence holds ``items`` as a single element.

    Example
    -------
    > contains([1, 2, 3, 4, 5], Subsequence([3, 4]))
    True
    > contains([1, 2, 3, 4, 5], Subsequence([4, 3]))
    False
    """

    items: Tuple

    def __init__(self, items):
        object.__setattr__(self, "items", tuple(items))

    def __len__(self):
        return len(self.items)
