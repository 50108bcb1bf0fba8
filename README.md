# variantkit

variantkit describes enums whose variants may carry data (no fields, positional
fields or named fields) and derives the usual tools from that description:
variant names in several case styles, conversion to and from strings,
double-ended iteration, field-less discriminant enums, lookup by integer
discriminant, messages and properties, per-variant tables and field access.

It has no dependencies outside the standard library.

## Install

```
pip install variantkit
```

To run the tests, install the `test` extra and run `pytest`.

## Example

```python
from variantkit.model import Field, Variant, define_enum
from variantkit.strings import as_str, parse, to_string
from variantkit.iteration import iterate

Color = define_enum(
    "Color",
    [
        Variant("Red", to_string="RedRed"),
        Variant("Blue", fields=(Field("hue", default=0),)),
        Variant("Yellow", serialize=("y", "yellow")),
        Variant("Green", fields=(Field(default=""),), default=True),
    ],
)

as_str(Color.Red)                      # "RedRed"
parse(Color, "y") == Color.Yellow      # True
to_string(parse(Color, "lime"))        # "lime" (Green catches unmatched text)
Color.Blue(hue=3).is_blue()            # True
Color.count()                          # 4
len(iterate(Color))                    # 4
```

Unit variants are reached as attributes of the enum (`Color.Red`); variants
with fields are called to build a value (`Color.Blue(hue=3)`). Fields that are
not given take a copy of their `Field.default`.

## Modules

- `variantkit.model`: `define_enum`, `EnumType`, `EnumValue`, `Variant`,
  `Field`, `VariantKind`, `CaseStyle`, `snakify`, `DisabledVariantError`.
  - `EnumType.variant(name)`, `count()` (enabled variants), `variant_names()`
    (preferred names of all variants) and `variant_array()` (every variant as
    a value; raises `ValueError` unless all variants are units).
  - `EnumValue.is_variant(name)`, plus `is_<snake_name>()` for every enabled
    variant. Fields are read and written with `value[index]` or
    `value["field"]`.
  - `CaseStyle.parse(text)` accepts spellings such as `snake_case`,
    `kebab_case`, `kebab-case`, `camelCase`, `camel_case` (PascalCase),
    `PascalCase`, `SCREAMING_SNAKE_CASE`, `SCREAMING-KEBAB-CASE`, `lowercase`,
    `UPPERCASE`, `title_case`, `mixed_case` and `Train-Case`;
    `CaseStyle.apply(name)` converts a name.
- `variantkit.strings`: `as_str(value)`, `to_string(value)`,
  `display(value, spec)`, `parse(enum_type, text)`, `format_fields(template)`,
  `ParseError` and `FormatStringError`.
- `variantkit.iteration`: `iterate(enum_type)` returns an `EnumIterator` with
  `len()`, `reversed()`, `next_back()`, `nth(n)`, `size_hint()` and `clone()`.
- `variantkit.discriminants`: `discriminants(enum_type, *, name, serialize_all,
  prefix, passthrough)` builds a companion enum of unit variants (named
  `<Name>Discriminants` by default); `discriminant_of(value, discriminant_type)`
  maps a value to it.
- `variantkit.from_repr`: `discriminant_values(enum_type)` and
  `from_repr(enum_type, discriminant)`.
- `variantkit.messages`: `get_message`, `get_detailed_message`,
  `get_documentation`, `get_serializations`, `get_str`.
- `variantkit.table`: `EnumTable(enum_type, *values)` holds one value per
  enabled unit variant, indexed by value or variant name, with the class
  methods `filled` and `from_closure` and the methods `transform`, `all`,
  `all_ok` and `copy`.
- `variantkit.try_as`: `try_as(value, name)` and `try_as_mut(value, name)` for
  tuple variants; the latter returns a writable `FieldView`.

## Behaviour

- A variant's preferred name is its `to_string` if set; otherwise the longest
  of its `serialize` names (the last one given, on a tie); otherwise its own
  name in the enum's `serialize_all` style. The enum's `prefix` is put in
  front of it.
- A variant is parsed from each of its `serialize` names and its `to_string`,
  or from its styled name when it has neither. `parse` raises `ParseError`
  (a `ValueError`) when nothing matches, unless one variant is marked
  `default`, which then receives the text as its single field. Matching
  ignores ASCII case where the variant, or failing that the enum, sets
  `ascii_case_insensitive`.
- `display` applies a format spec; for named-field variants the preferred
  name may use `{field}` placeholders, checked by `format_fields`.
- Disabled variants are left out of counts, iteration, parsing, discriminant
  values and tables. `as_str`, `to_string`, `display`, `is_variant` and table
  indexing raise `DisabledVariantError` for them; the message functions return
  `None`, while `get_serializations` still answers.
- `EnumTable.all()` returns `None` if any value is `None`; `all_ok()` raises
  the first value that is an exception.

## What it does not do

variantkit works on enums described at run time with `define_enum`; it does
not attach behaviour to Python's own `enum.Enum` classes, generate code, or
provide a command-line interface.