"""Enum definitions: variants, case styles, values and the basic queries on them."""

from __future__ import annotations

import copy
import functools
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class VariantKind(Enum):
    """The shape of the data a variant carries."""

    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


def _split_words(name: str) -> list[str]:
    """Split an identifier into words at separators and case boundaries."""
    words: list[str] = []
    for chunk in re.split(r"[\W_]+", name):
        if not chunk:
            continue
        start = 0
        mode: str | None = None
        for i, char in enumerate(chunk):
            if char.islower():
                mode = "lower"
            elif char.isupper():
                mode = "upper"
            if i + 1 >= len(chunk):
                break
            nxt = chunk[i + 1]
            after = chunk[i + 2] if i + 2 < len(chunk) else ""
            if (mode == "lower" and nxt.isupper()) or (
                mode == "upper" and nxt.isupper() and after.islower()
            ):
                words.append(chunk[start : i + 1])
                start = i + 1
                mode = None
        words.append(chunk[start:])
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _snake_case(name: str) -> str:
    return "_".join(word.lower() for word in _split_words(name))


def snakify(name: str) -> str:
    """Snake-case a name, also separating each run of digits with an underscore."""
    return re.sub(r"(?<=[^0-9])(?=[0-9])", "_", _snake_case(name))


class CaseStyle(Enum):
    """A naming convention applied to variant names when serializing them."""

    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    SCREAMING_KEBAB = "SCREAMING-KEBAB-CASE"
    SHOUTY_SNAKE = "SCREAMING_SNAKE_CASE"
    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    TITLE = "title_case"
    MIXED = "mixed_case"
    TRAIN = "Train-Case"

    @classmethod
    def parse(cls, text: str | CaseStyle) -> CaseStyle:
        """Return the style named by ``text``, accepting every known spelling."""
        if isinstance(text, CaseStyle):
            return text
        try:
            return _CASE_STYLE_ALIASES[text]
        except KeyError:
            valid = ", ".join(f"`{alias}`" for alias in _CASE_STYLE_ALIASES)
            raise ValueError(
                f"Unexpected case style for serialize_all: `{text}`. Valid values are: {valid}"
            ) from None

    def apply(self, name: str) -> str:
        """Convert ``name`` to this style."""
        if self is CaseStyle.LOWER:
            return name.lower()
        if self is CaseStyle.UPPER:
            return name.upper()
        words = _split_words(name)
        if self is CaseStyle.SNAKE:
            return "_".join(w.lower() for w in words)
        if self is CaseStyle.KEBAB:
            return "-".join(w.lower() for w in words)
        if self is CaseStyle.SHOUTY_SNAKE:
            return "_".join(w.upper() for w in words)
        if self is CaseStyle.SCREAMING_KEBAB:
            return "-".join(w.upper() for w in words)
        if self is CaseStyle.PASCAL:
            return "".join(_capitalize(w) for w in words)
        if self is CaseStyle.TITLE:
            return " ".join(_capitalize(w) for w in words)
        if self is CaseStyle.TRAIN:
            return "-".join(_capitalize(w) for w in words)
        # CAMEL and MIXED: lower camel case.
        if not words:
            return ""
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])


_CASE_STYLE_ALIASES: dict[str, CaseStyle] = {
    "camel_case": CaseStyle.PASCAL,
    "PascalCase": CaseStyle.PASCAL,
    "camelCase": CaseStyle.CAMEL,
    "snake_case": CaseStyle.SNAKE,
    "snek_case": CaseStyle.SNAKE,
    "kebab_case": CaseStyle.KEBAB,
    "kebab-case": CaseStyle.KEBAB,
    "SCREAMING-KEBAB-CASE": CaseStyle.SCREAMING_KEBAB,
    "SCREAMING_SNAKE_CASE": CaseStyle.SHOUTY_SNAKE,
    "shouty_snake_case": CaseStyle.SHOUTY_SNAKE,
    "shouty_snek_case": CaseStyle.SHOUTY_SNAKE,
    "lowercase": CaseStyle.LOWER,
    "UPPERCASE": CaseStyle.UPPER,
    "title_case": CaseStyle.TITLE,
    "mixed_case": CaseStyle.MIXED,
    "Train-Case": CaseStyle.TRAIN,
}


@dataclass(frozen=True)
class Field:
    """One field of a tuple or struct variant.

    ``default`` stands in for the field type's default value; ``default_with``
    is a factory used instead when a value is parsed from a string.
    """

    name: str | None = None
    default: Any = None
    default_with: Callable[[], Any] | None = None


def _as_tuple(value: str | Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Variant:
    """A variant of an enum together with its options."""

    name: str
    fields: tuple[Field, ...] = ()
    kind: VariantKind | None = None
    serialize: tuple[str, ...] = ()
    to_string: str | None = None
    disabled: bool = False
    default: bool = False
    default_with: Callable[[], Any] | None = None
    ascii_case_insensitive: bool | None = None
    message: str | None = None
    detailed_message: str | None = None
    documentation: tuple[str, ...] = ()
    props: Mapping[str, str] = field(default_factory=dict)
    discriminant: int | None = None
    passthrough: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ValueError(f"invalid variant name: {self.name!r}")
        fields = tuple(f if isinstance(f, Field) else Field(name=f) for f in self.fields)
        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "serialize", _as_tuple(self.serialize))
        docs = self.documentation
        if isinstance(docs, str):
            docs = docs.split("\n")
        object.__setattr__(self, "documentation", tuple(docs))
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))
        object.__setattr__(self, "passthrough", MappingProxyType(dict(self.passthrough)))

        named = [f.name is not None for f in fields]
        kind = self.kind
        if kind is None:
            if not fields:
                kind = VariantKind.UNIT
            elif all(named):
                kind = VariantKind.STRUCT
            elif not any(named):
                kind = VariantKind.TUPLE
            else:
                raise ValueError(f"variant {self.name} mixes named and unnamed fields")
        if kind is VariantKind.UNIT and fields:
            raise ValueError(f"unit variant {self.name} cannot have fields")
        if kind is VariantKind.TUPLE and any(named):
            raise ValueError(f"tuple variant {self.name} cannot have named fields")
        if kind is VariantKind.STRUCT:
            if not all(named):
                raise ValueError(f"struct variant {self.name} needs named fields")
            names = [f.name for f in fields]
            if len(set(names)) != len(names):
                raise ValueError(f"struct variant {self.name} repeats a field name")
        object.__setattr__(self, "kind", kind)

    def __hash__(self) -> int:
        return hash((self.name, self.kind))

    def serializations(self, case_style: CaseStyle | None) -> tuple[str, ...]:
        """All strings this variant is parsed from."""
        names = list(self.serialize)
        if self.to_string is not None:
            names.append(self.to_string)
        if not names:
            names.append(case_style.apply(self.name) if case_style else self.name)
        return tuple(names)

    def preferred_name(self, case_style: CaseStyle | None, prefix: str | None) -> str:
        """The name this variant is shown as."""
        if self.to_string is not None:
            output = self.to_string
        elif self.serialize:
            # The last of the longest serializations wins.
            output = max(reversed(self.serialize), key=len)
        else:
            output = case_style.apply(self.name) if case_style else self.name
        return f"{prefix}{output}" if prefix else output


class DisabledVariantError(ValueError):
    """Raised when an operation is used on a variant that is disabled for it."""


class EnumValue:
    """A value of an enum: one variant with its field data."""

    def __init__(self, enum_type: EnumType, name: str, *args: Any, **kwargs: Any) -> None:
        variant = enum_type.variant(name)
        self.enum_type = enum_type
        self.variant = variant
        label = f"{enum_type.name}.{variant.name}"
        if variant.kind is VariantKind.UNIT:
            if args or kwargs:
                raise TypeError(f"{label} takes no fields")
            self.values: Any = ()
        elif variant.kind is VariantKind.TUPLE:
            if kwargs:
                raise TypeError(f"{label} takes positional fields only")
            if len(args) > len(variant.fields):
                raise TypeError(
                    f"{label} takes {len(variant.fields)} fields, {len(args)} given"
                )
            missing = variant.fields[len(args):]
            self.values = list(args) + [copy.deepcopy(f.default) for f in missing]
        else:
            if args:
                raise TypeError(f"{label} takes keyword fields only")
            names = {f.name for f in variant.fields}
            unknown = sorted(set(kwargs) - names)
            if unknown:
                raise TypeError(f"{label} has no field {unknown[0]!r}")
            self.values = {
                f.name: kwargs[f.name] if f.name in kwargs else copy.deepcopy(f.default)
                for f in variant.fields
            }

    @property
    def name(self) -> str:
        """The variant's identifier."""
        return self.variant.name

    def is_variant(self, name: str) -> bool:
        """Whether this value is of the variant called ``name``."""
        variant = self.enum_type.variant(name)
        if variant.disabled:
            raise DisabledVariantError(
                f"{self.enum_type.name}.{variant.name} is disabled"
            )
        return self.variant.name == variant.name

    def __getattr__(self, attr: str) -> Callable[[], bool]:
        if attr.startswith("is_"):
            enum_type = self.__dict__.get("enum_type")
            if enum_type is not None:
                wanted = attr[3:]
                for variant in enum_type.variants:
                    if not variant.disabled and snakify(variant.name) == wanted:
                        target = variant.name
                        return lambda: self.variant.name == target
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {attr!r}")

    def __getitem__(self, key: int | str) -> Any:
        return self.values[key]

    def __setitem__(self, key: int | str, value: Any) -> None:
        if self.variant.kind is VariantKind.STRUCT and key not in self.values:
            raise KeyError(key)
        self.values[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumValue):
            return NotImplemented
        return (
            self.enum_type is other.enum_type
            and self.variant.name == other.variant.name
            and self.values == other.values
        )

    def __hash__(self) -> int:
        return hash((self.enum_type.name, self.variant.name))

    def __repr__(self) -> str:
        label = f"{self.enum_type.name}.{self.variant.name}"
        if self.variant.kind is VariantKind.UNIT:
            return label
        if self.variant.kind is VariantKind.TUPLE:
            inner = ", ".join(repr(v) for v in self.values)
        else:
            inner = ", ".join(f"{k}={v!r}" for k, v in self.values.items())
        return f"{label}({inner})"


@dataclass(frozen=True, eq=False, repr=False)
class EnumType:
    """An enum: an ordered set of variants and the options shared by them."""

    name: str
    variants: tuple[Variant, ...]
    serialize_all: CaseStyle | None = None
    prefix: str | None = None
    ascii_case_insensitive: bool = False
    use_phf: bool = False
    _index: dict[str, Variant] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        variants = tuple(v if isinstance(v, Variant) else Variant(v) for v in self.variants)
        object.__setattr__(self, "variants", variants)
        if self.serialize_all is not None:
            object.__setattr__(self, "serialize_all", CaseStyle.parse(self.serialize_all))
        index: dict[str, Variant] = {}
        for variant in variants:
            if variant.name in index:
                raise ValueError(f"{self.name} repeats the variant {variant.name}")
            index[variant.name] = variant
        object.__setattr__(self, "_index", index)

        defaults = [v for v in variants if v.default and not v.disabled]
        if len(defaults) > 1:
            raise ValueError("Found multiple occurrences of strum(default)")
        for variant in defaults:
            if variant.kind is not VariantKind.TUPLE or len(variant.fields) != 1:
                raise ValueError(
                    "Default only works on newtype structs with a single String field"
                )

    def variant(self, name: str) -> Variant:
        """The variant called ``name``."""
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"{self.name} has no variant {name!r}") from None

    def count(self) -> int:
        """The number of variants that are not disabled."""
        return sum(1 for v in self.variants if not v.disabled)

    def variant_names(self) -> tuple[str, ...]:
        """The preferred name of every variant, in declaration order."""
        return tuple(v.preferred_name(self.serialize_all, self.prefix) for v in self.variants)

    def variant_array(self) -> tuple[EnumValue, ...]:
        """Every variant as a value; only possible when all variants are units."""
        if any(v.kind is not VariantKind.UNIT for v in self.variants):
            raise ValueError("variant_array only supports enums with unit variants")
        return tuple(EnumValue(self, v.name) for v in self.variants)

    def __getattr__(self, attr: str) -> Any:
        if not attr.startswith("_"):
            variant = self.__dict__.get("_index", {}).get(attr)
            if variant is not None:
                if variant.kind is VariantKind.UNIT:
                    return EnumValue(self, attr)
                return functools.partial(EnumValue, self, attr)
        raise AttributeError(f"{self.name} has no attribute {attr!r}")

    def __copy__(self) -> EnumType:
        # Enum types are identities: values compare their type with ``is``.
        return self

    def __deepcopy__(self, memo: dict) -> EnumType:
        memo[id(self)] = self
        return self

    def __repr__(self) -> str:
        return f"<enum {self.name}>"


def define_enum(
    name: str,
    variants: Iterable[Variant | str],
    *,
    serialize_all: CaseStyle | str | None = None,
    prefix: str | None = None,
    ascii_case_insensitive: bool = False,
    use_phf: bool = False,
) -> EnumType:
    """Define an enum; plain strings in ``variants`` become unit variants."""
    return EnumType(
        name,
        tuple(variants),
        serialize_all=serialize_all,
        prefix=prefix,
        ascii_case_insensitive=ascii_case_insensitive,
        use_phf=use_phf,
    )