"""A mapping holding one value for each enabled unit variant of an enum."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from variantkit.model import (
    DisabledVariantError,
    EnumType,
    EnumValue,
    Variant,
    VariantKind,
)


def _table_variants(enum_type: EnumType) -> tuple[Variant, ...]:
    variants = tuple(v for v in enum_type.variants if not v.disabled)
    if any(v.kind is not VariantKind.UNIT for v in variants):
        raise ValueError("`EnumTable` doesn't support enums with non-unit variants")
    if not variants:
        raise ValueError("`EnumTable` requires at least one non-disabled variant")
    return variants


class EnumTable:
    """One value per enabled variant, indexed by the enum's values.

    Indexing with a disabled variant raises DisabledVariantError.
    """

    def __init__(self, enum_type: EnumType, *values: Any) -> None:
        variants = _table_variants(enum_type)
        if len(values) != len(variants):
            raise TypeError(
                f"{enum_type.name}Table takes {len(variants)} values, {len(values)} given"
            )
        self.enum_type = enum_type
        self._values: dict[str, Any] = {v.name: value for v, value in zip(variants, values)}

    @classmethod
    def filled(cls, enum_type: EnumType, value: Any) -> EnumTable:
        """A table holding a copy of ``value`` for every variant."""
        variants = _table_variants(enum_type)
        return cls(enum_type, *(copy.deepcopy(value) for _ in variants))

    @classmethod
    def from_closure(cls, enum_type: EnumType, func: Callable[[EnumValue], Any]) -> EnumTable:
        """A table holding ``func(variant)`` for every variant."""
        variants = _table_variants(enum_type)
        return cls(enum_type, *(func(EnumValue(enum_type, v.name)) for v in variants))

    def transform(self, func: Callable[[EnumValue, Any], Any]) -> EnumTable:
        """A new table holding ``func(variant, current value)`` for every variant."""
        return type(self)(
            self.enum_type,
            *(func(EnumValue(self.enum_type, name), value) for name, value in self._values.items()),
        )

    def all(self) -> EnumTable | None:
        """The same table if no value is None, otherwise None."""
        if any(value is None for value in self._values.values()):
            return None
        return type(self)(self.enum_type, *self._values.values())

    def all_ok(self) -> EnumTable:
        """The same table if no value is an exception; otherwise raise the first one."""
        for value in self._values.values():
            if isinstance(value, BaseException):
                raise value
        return type(self)(self.enum_type, *self._values.values())

    def copy(self) -> EnumTable:
        """An independent deep copy of the table."""
        return type(self)(self.enum_type, *copy.deepcopy(list(self._values.values())))

    def _key(self, idx: EnumValue | str) -> str:
        if isinstance(idx, EnumValue):
            if idx.enum_type is not self.enum_type:
                raise TypeError(
                    f"{self.enum_type.name}Table cannot be indexed with {idx.enum_type.name}"
                )
            name = idx.name
        elif isinstance(idx, str):
            name = idx
        else:
            raise TypeError(f"{self.enum_type.name}Table index must be a variant")
        variant = self.enum_type.variant(name)
        if variant.disabled:
            raise DisabledVariantError(
                f"Can't use `{variant.name}` with `{self.enum_type.name}Table`"
                " - variant is disabled for Strum features"
            )
        return variant.name

    def __getitem__(self, idx: EnumValue | str) -> Any:
        return self._values[self._key(idx)]

    def __setitem__(self, idx: EnumValue | str, value: Any) -> None:
        self._values[self._key(idx)] = value

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumTable):
            return NotImplemented
        return self.enum_type is other.enum_type and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{self.enum_type.name}Table({inner})"