"""Converting enum values to strings and parsing them back."""

from __future__ import annotations

import keyword
import string

from variantkit.model import (
    DisabledVariantError,
    EnumType,
    EnumValue,
    Variant,
    VariantKind,
)

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class ParseError(ValueError):
    """Raised when no variant matches the string being parsed."""

    def __init__(self, text: str = "") -> None:
        super().__init__("Matching variant not found")
        self.text = text


class FormatStringError(ValueError):
    """Raised when a variant's format string is malformed."""


def _ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def _ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def _eq_ignore_ascii_case(left: str, right: str) -> bool:
    return _ascii_lower(left) == _ascii_lower(right)


def _is_ident(text: str) -> bool:
    return text.isidentifier() and text != "_" and not keyword.iskeyword(text)


def format_fields(template: str) -> tuple[str, ...]:
    """The field names a display template refers to, in order of use."""
    text = template.replace("{{", "").replace("}}", "")
    used: list[str] = []
    start: int | None = None
    for i, char in enumerate(text):
        if char == "{":
            if start is not None:
                raise FormatStringError("Bracket opened without closing previous bracket")
            start = i
        elif char == "}":
            if start is None:
                raise FormatStringError("Bracket closed without previous opened bracket")
            ident = text[start + 1 : i].split(":", 1)[0]
            start = None
            if not _is_ident(ident):
                raise FormatStringError("Invalid identifier inside format string bracket")
            used.append(ident)
    return tuple(used)


def _enabled_variant(value: EnumValue, operation: str) -> Variant:
    variant = value.variant
    if variant.disabled:
        raise DisabledVariantError(
            f"{operation} called on disabled variant {value.enum_type.name}.{variant.name}"
        )
    return variant


def _preferred(value: EnumValue) -> str:
    enum_type = value.enum_type
    return value.variant.preferred_name(enum_type.serialize_all, enum_type.prefix)


def _is_default_display(variant: Variant) -> bool:
    return variant.to_string is None and variant.default


def as_str(value: EnumValue) -> str:
    """The static name of a value's variant."""
    _enabled_variant(value, "as_str()")
    return _preferred(value)


def to_string(value: EnumValue) -> str:
    """The value as a string; a default variant shows its inner value."""
    variant = _enabled_variant(value, "to_string()")
    if _is_default_display(variant):
        return str(value.values[0])
    return _preferred(value)


def display(value: EnumValue, spec: str = "") -> str:
    """Format the value, applying ``spec`` as a format specification."""
    variant = _enabled_variant(value, "fmt()")
    if _is_default_display(variant):
        return format(value.values[0], spec)
    output = _preferred(value)
    if variant.kind is VariantKind.STRUCT:
        used = format_fields(output)
        if used:
            fields = {name: value.values[name] for name in used if name in value.values}
            try:
                output = output.format(**fields)
            except (KeyError, IndexError, ValueError) as exc:
                raise FormatStringError(
                    f"cannot format {value.enum_type.name}.{variant.name}: {exc}"
                ) from None
    return format(output, spec)


def _instantiate(enum_type: EnumType, variant: Variant) -> EnumValue:
    if variant.kind is VariantKind.UNIT:
        return EnumValue(enum_type, variant.name)
    if variant.kind is VariantKind.TUPLE:
        if variant.default_with is not None:
            return EnumValue(enum_type, variant.name, variant.default_with())
        return EnumValue(enum_type, variant.name)
    overrides = {
        f.name: f.default_with() for f in variant.fields if f.default_with is not None
    }
    return EnumValue(enum_type, variant.name, **overrides)


def parse(enum_type: EnumType, text: str) -> EnumValue:
    """Parse ``text`` into a value of ``enum_type``, raising ParseError if nothing matches."""
    default: Variant | None = None
    exact: dict[str, Variant] = {}
    arms: list[tuple[str, bool, Variant]] = []
    for variant in enum_type.variants:
        if variant.disabled:
            continue
        if variant.default:
            default = variant
            continue
        insensitive = (
            variant.ascii_case_insensitive
            if variant.ascii_case_insensitive is not None
            else enum_type.ascii_case_insensitive
        )
        for serialization in variant.serializations(enum_type.serialize_all):
            if enum_type.use_phf:
                exact.setdefault(serialization, variant)
                if insensitive:
                    exact.setdefault(_ascii_lower(serialization), variant)
                    exact.setdefault(_ascii_upper(serialization), variant)
                    arms.append((serialization, True, variant))
            else:
                arms.append((serialization, insensitive, variant))

    found = exact.get(text)
    if found is not None:
        return _instantiate(enum_type, found)
    for serialization, insensitive, variant in arms:
        if text == serialization or (insensitive and _eq_ignore_ascii_case(text, serialization)):
            return _instantiate(enum_type, variant)
    if default is not None:
        return EnumValue(enum_type, default.name, text)
    raise ParseError(text)