"""Messages, documentation, serializations and string properties of variants."""

from __future__ import annotations

from variantkit.model import EnumValue, Variant


def _enabled(value: EnumValue) -> Variant | None:
    variant = value.variant
    return None if variant.disabled else variant


def get_message(value: EnumValue) -> str | None:
    """The short message of the value's variant, if it has one and is enabled."""
    variant = _enabled(value)
    return None if variant is None else variant.message


def get_detailed_message(value: EnumValue) -> str | None:
    """The detailed message, falling back to the short message."""
    variant = _enabled(value)
    if variant is None:
        return None
    if variant.detailed_message is not None:
        return variant.detailed_message
    return variant.message


def get_documentation(value: EnumValue) -> str | None:
    """The variant's documentation with one leading space stripped from each line.

    A single line is returned as it is; several lines are each ended by a newline.
    """
    variant = _enabled(value)
    if variant is None or not variant.documentation:
        return None
    lines = [line[1:] if line.startswith(" ") else line for line in variant.documentation]
    if len(lines) == 1:
        return lines[0]
    return "".join(f"{line}\n" for line in lines)


def get_serializations(value: EnumValue) -> tuple[str, ...]:
    """Every string the value's variant is parsed from, even when it is disabled."""
    return value.variant.serializations(value.enum_type.serialize_all)


def get_str(value: EnumValue, prop: str) -> str | None:
    """The string property ``prop`` of the value's variant, or None."""
    variant = _enabled(value)
    if variant is None:
        return None
    return variant.props.get(prop)