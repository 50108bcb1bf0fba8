"""Field-less companion enums that name the variant of a value."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from variantkit.model import (
    CaseStyle,
    EnumType,
    EnumValue,
    Variant,
    define_enum,
)

_RESERVED_VARIANT_OPTIONS = frozenset({"name", "fields", "kind", "discriminant"})
_TYPE_OPTIONS = frozenset({"ascii_case_insensitive", "use_phf"})


def _discriminant_variant(variant: Variant) -> Variant:
    options = dict(variant.passthrough)
    reserved = sorted(_RESERVED_VARIANT_OPTIONS & options.keys())
    if reserved:
        raise ValueError(
            f"cannot pass {reserved[0]!r} through to the discriminant of {variant.name}"
        )
    kwargs: dict[str, Any] = {"documentation": variant.documentation, **options}
    try:
        return Variant(variant.name, discriminant=variant.discriminant, **kwargs)
    except TypeError as exc:
        raise ValueError(
            f"invalid passthrough options on {variant.name}: {exc}"
        ) from None


def discriminants(
    enum_type: EnumType,
    *,
    name: str | None = None,
    serialize_all: CaseStyle | str | None = None,
    prefix: str | None = None,
    passthrough: Mapping[str, Any] | None = None,
) -> EnumType:
    """Build an enum with one unit variant for each variant of ``enum_type``.

    Each unit variant has the same name, discriminant and documentation as the
    variant of ``enum_type`` it stands for, plus the options found in that
    variant's ``passthrough`` mapping. The ``passthrough`` argument gives
    further options for the new enum as a whole.
    """
    options = dict(passthrough or {})
    unknown = sorted(options.keys() - _TYPE_OPTIONS)
    if unknown:
        raise ValueError(f"unknown discriminant enum option {unknown[0]!r}")
    return define_enum(
        name if name is not None else f"{enum_type.name}Discriminants",
        [_discriminant_variant(v) for v in enum_type.variants],
        serialize_all=serialize_all,
        prefix=prefix,
        **options,
    )


def discriminant_of(value: EnumValue, discriminant_type: EnumType) -> EnumValue:
    """The discriminant of ``value`` in ``discriminant_type``."""
    try:
        discriminant_type.variant(value.name)
    except KeyError:
        raise ValueError(
            f"{discriminant_type.name} has no discriminant for {value.enum_type.name}.{value.name}"
        ) from None
    return EnumValue(discriminant_type, value.name)