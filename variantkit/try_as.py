"""Extracting the fields of tuple variants."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from variantkit.model import DisabledVariantError, EnumValue, Variant, VariantKind


class FieldView:
    """A writable view on the fields of a tuple-variant value."""

    def __init__(self, value: EnumValue) -> None:
        self._value = value

    def __len__(self) -> int:
        return len(self._value.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._value.values))

    def __getitem__(self, index: int) -> Any:
        return self._value.values[index]

    def __setitem__(self, index: int, item: Any) -> None:
        if not isinstance(index, int):
            raise TypeError("field index must be an int")
        self._value.values[index]  # raises IndexError when out of range
        self._value[index] = item

    @property
    def value(self) -> Any:
        """The only field of a single-field variant."""
        self._require_single()
        return self._value.values[0]

    @value.setter
    def value(self, item: Any) -> None:
        self._require_single()
        self._value[0] = item

    def _require_single(self) -> None:
        if len(self) != 1:
            raise TypeError(f"{self._value!r} does not have exactly one field")

    def __repr__(self) -> str:
        return f"FieldView({self._value!r})"


def _tuple_variant(value: EnumValue, name: str) -> Variant:
    variant = value.enum_type.variant(name)
    label = f"{value.enum_type.name}.{variant.name}"
    if variant.disabled:
        raise DisabledVariantError(f"{label} is disabled")
    if variant.kind is not VariantKind.TUPLE:
        raise TypeError(f"{label} is not a tuple variant")
    return variant


def try_as(value: EnumValue, name: str) -> Any:
    """The fields of ``value`` if it is the tuple variant ``name``, else None.

    A single field is returned as itself, several as a tuple, none as ``()``.
    """
    variant = _tuple_variant(value, name)
    if value.variant.name != variant.name:
        return None
    fields = value.values
    if len(fields) == 1:
        return fields[0]
    return tuple(fields)


def try_as_mut(value: EnumValue, name: str) -> FieldView | None:
    """A writable view on the fields if ``value`` is the tuple variant ``name``."""
    variant = _tuple_variant(value, name)
    if value.variant.name != variant.name:
        return None
    return FieldView(value)