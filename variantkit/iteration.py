"""Double-ended iteration over the enabled variants of an enum."""

from __future__ import annotations

from collections.abc import Iterator

from variantkit.model import EnumType, EnumValue


class EnumIterator(Iterator[EnumValue]):
    """Yields every enabled variant in declaration order, from either end.

    Variants that carry data are produced with each field set to its default.
    ``next_back`` and ``nth`` return ``None`` once the iterator is exhausted.
    """

    def __init__(self, enum_type: EnumType) -> None:
        self.enum_type = enum_type
        self._variants = tuple(v for v in enum_type.variants if not v.disabled)
        self._idx = 0
        self._back_idx = 0

    def _get(self, idx: int) -> EnumValue:
        return EnumValue(self.enum_type, self._variants[idx].name)

    def __next__(self) -> EnumValue:
        value = self.nth(0)
        if value is None:
            raise StopIteration
        return value

    def nth(self, n: int) -> EnumValue | None:
        """Skip ``n`` values and return the next one, or ``None`` past the end."""
        if n < 0:
            raise ValueError("n must not be negative")
        count = len(self._variants)
        idx = self._idx + n + 1
        if idx + self._back_idx > count:
            self._idx = count
            return None
        self._idx = idx
        return self._get(idx - 1)

    def next_back(self) -> EnumValue | None:
        """Take a value from the back, or ``None`` when nothing is left."""
        count = len(self._variants)
        back_idx = self._back_idx + 1
        if self._idx + back_idx > count:
            self._back_idx = count
            return None
        self._back_idx = back_idx
        return self._get(count - back_idx)

    def size_hint(self) -> tuple[int, int]:
        """Lower and upper bound of the values left; both are exact."""
        count = len(self._variants)
        used = self._idx + self._back_idx
        left = 0 if used >= count else count - used
        return left, left

    def __len__(self) -> int:
        return self.size_hint()[0]

    def __reversed__(self) -> Iterator[EnumValue]:
        while (value := self.next_back()) is not None:
            yield value

    def clone(self) -> EnumIterator:
        """An independent iterator at the same position."""
        other = EnumIterator(self.enum_type)
        other._idx = self._idx
        other._back_idx = self._back_idx
        return other

    __copy__ = clone

    def __repr__(self) -> str:
        return f"{self.enum_type.name}Iter(len={len(self)})"


def iterate(enum_type: EnumType) -> EnumIterator:
    """An iterator over the enabled variants of ``enum_type``."""
    return EnumIterator(enum_type)