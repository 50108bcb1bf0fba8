import pytest

from variantkit.from_repr import discriminant_values, from_repr
from variantkit.model import Field, Variant, define_enum

DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


@pytest.fixture
def week():
    return define_enum(
        "Week",
        [
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            Variant("Friday", discriminant=4 + 3),
            Variant("Saturday", discriminant=8),
        ],
    )


def test_simple(week):
    assert from_repr(week, 0) == week.Sunday
    assert from_repr(week, 1) == week.Monday
    assert from_repr(week, 6) is None
    assert from_repr(week, 7) == week.Friday
    assert from_repr(week, 8) == week.Saturday
    assert from_repr(week, 9) is None


def test_discriminant_values(week):
    assert discriminant_values(week) == {
        "Sunday": 0,
        "Monday": 1,
        "Tuesday": 2,
        "Wednesday": 3,
        "Thursday": 4,
        "Friday": 7,
        "Saturday": 8,
    }


def test_implicit_discriminants():
    plain = define_enum("Week", DAYS)
    assert from_repr(plain, 0) == plain.Sunday
    assert from_repr(plain, 6) == plain.Saturday
    assert from_repr(plain, 7) is None


def test_disabled_variants_are_skipped():
    enum = define_enum("Gaps", ["A", Variant("B", disabled=True), "C"])
    assert discriminant_values(enum) == {"A": 0, "C": 1}
    assert from_repr(enum, 1) == enum.C
    assert from_repr(enum, 2) is None


def test_fields_get_defaults():
    enum = define_enum(
        "Shape",
        [Variant("Circle", fields=(Field(default=0),)), Variant("Box", fields=(Field(name="w", default=1),))],
    )
    assert from_repr(enum, 0) == enum.Circle(0)
    assert from_repr(enum, 1) == enum.Box(w=1)


def test_non_int_rejected(week):
    with pytest.raises(TypeError):
        from_repr(week, "1")
    with pytest.raises(TypeError):
        from_repr(week, True)