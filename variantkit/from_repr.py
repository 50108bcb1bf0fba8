"""Looking up variants by their integer discriminant."""

from __future__ import annotations

from variantkit.model import EnumType, EnumValue


def discriminant_values(enum_type: EnumType) -> dict[str, int]:
    """The discriminant of every enabled variant, keyed by variant name.

    A variant without an explicit discriminant takes one more than the
    previous enabled variant, or 0 if it is the first.
    """
    values: dict[str, int] = {}
    previous: int | None = None
    for variant in enum_type.variants:
        if variant.disabled:
            continue
        if variant.discriminant is not None:
            current = variant.discriminant
        elif previous is None:
            current = 0
        else:
            current = previous + 1
        values[variant.name] = current
        previous = current
    return values


def from_repr(enum_type: EnumType, discriminant: int) -> EnumValue | None:
    """The first enabled variant with this discriminant, fields defaulted, or None."""
    if isinstance(discriminant, bool) or not isinstance(discriminant, int):
        raise TypeError(f"discriminant must be an int, not {type(discriminant).__name__}")
    for name, value in discriminant_values(enum_type).items():
        if value == discriminant:
            return EnumValue(enum_type, name)
    return None