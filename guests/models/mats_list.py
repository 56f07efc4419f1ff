# guests/models/mats_list.py
"""
Mats list value type.

A mats list is a compact description of a set of mat numbers, written as
comma separated items that are either a single positive integer or an
inclusive ``low-high`` range, e.g. ``"1-3,5,9-12"``. Items must appear in
strictly ascending order, so a parsed list never contains duplicates.

The canonical string form is the fully expanded list (``"1,2,3,5,9,10,11,12"``);
ranges are not re-collapsed.
"""

import re
from typing import Iterator, List, Tuple

from guests.core.exceptions import MatsListError

__all__ = ["MAX_MAT_NUMBER", "MAX_RANGE_SIZE", "MatsList"]

_NUMBER = re.compile(r"\+?[0-9]+")

# Mat numbers are stored in a 32 bit integer column
MAX_MAT_NUMBER = 2147483647
MAX_RANGE_SIZE = 10000


class MatsList:
    """Immutable, strictly ascending set of positive mat numbers."""

    __slots__ = ("_exploded",)

    def __init__(self, text: str):
        if text is None:
            raise MatsListError("Mats list cannot be null")
        self._exploded: Tuple[int, ...] = tuple(self._explode(text))

    @property
    def exploded(self) -> Tuple[int, ...]:
        """Expanded mat numbers in ascending order."""
        return self._exploded

    def is_member_of(self, mat_number: int) -> bool:
        return mat_number in self._exploded

    def is_subset_of(self, other: "MatsList") -> bool:
        """True if every mat number in this list is also in ``other``."""
        return all(other.is_member_of(mat_number) for mat_number in self._exploded)

    def __contains__(self, mat_number: object) -> bool:
        return mat_number in self._exploded

    def __iter__(self) -> Iterator[int]:
        return iter(self._exploded)

    def __len__(self) -> int:
        return len(self._exploded)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatsList):
            return NotImplemented
        return self._exploded == other._exploded

    def __hash__(self) -> int:
        return hash(self._exploded)

    def __str__(self) -> str:
        return ",".join(str(mat_number) for mat_number in self._exploded)

    def __repr__(self) -> str:
        return f"MatsList('{self}')"

    @staticmethod
    def _explode(text: str) -> List[int]:
        exploded: List[int] = []
        highest = 0

        for item in text.split(","):
            if "-" in item:
                subitems = item.split("-")
                if len(subitems) != 2:
                    raise MatsListError(
                        f"List item '{item}' must not contain more than one dash", item
                    )
                low = MatsList._validated(subitems[0])
                high = MatsList._validated(subitems[1])
                if low > high:
                    raise MatsListError(
                        f"List item '{item}' must have lower number first", item
                    )
                if low <= highest:
                    raise MatsListError(
                        f"List item '{item}' is out of ascending order", item
                    )
                if high - low >= MAX_RANGE_SIZE:
                    raise MatsListError(
                        f"List item '{item}' must not span more than {MAX_RANGE_SIZE} mats", item
                    )
                exploded.extend(range(low, high + 1))
                highest = high
            else:
                only = MatsList._validated(item)
                if only <= highest:
                    raise MatsListError(
                        f"List item '{item}' is out of ascending order", item
                    )
                exploded.append(only)
                highest = only

        return exploded

    @staticmethod
    def _validated(item: str) -> int:
        """Convert one item or range endpoint to a positive integer."""
        trimmed = item.strip()
        if not trimmed:
            raise MatsListError(f"Item '{item}' cannot be blank", item)
        if not _NUMBER.fullmatch(trimmed):
            raise MatsListError(f"Item '{item}' is not a number", item)
        value = int(trimmed)
        if value > MAX_MAT_NUMBER:
            raise MatsListError(f"Item '{item}' is not a number", item)
        if value < 1:
            raise MatsListError(f"Item '{item}' must be positive", item)
        return value
