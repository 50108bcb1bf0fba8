import pytest

from variantkit.messages import (
    get_detailed_message,
    get_documentation,
    get_message,
    get_serializations,
    get_str,
)
from variantkit.model import Field, Variant, define_enum


@pytest.fixture
def pets():
    return define_enum(
        "Pets",
        [
            Variant("Dog", message="I'm a dog"),
            Variant(
                "Cat",
                message="I'm a cat",
                detailed_message="I'm a very exquisite striped cat",
                documentation=(" I eat birds.", "", " And fish."),
            ),
            Variant(
                "Fish",
                detailed_message="My fish is named Charles McFish",
                documentation=(" I'm a fish.",),
            ),
            Variant("Bird", documentation=(" I'm a bird.",)),
            Variant(
                "Hamster",
                documentation=(" This comment is not collected because it is explicitly disabled.",),
                disabled=True,
            ),
        ],
    )


@pytest.fixture
def brightness():
    return define_enum(
        "Brightness",
        [
            Variant("DarkBlack"),
            Variant("Dim", fields=(Field(name="glow", default=0),)),
            Variant("BrightWhite", serialize="bright"),
        ],
        serialize_all="kebab_case",
    )


def test_simple_message(pets):
    assert get_message(pets.Dog) == "I'm a dog"
    assert get_detailed_message(pets.Dog) == "I'm a dog"


def test_detailed_message(pets):
    assert get_message(pets.Cat) == "I'm a cat"
    assert get_detailed_message(pets.Cat) == "I'm a very exquisite striped cat"


def test_only_detailed_message(pets):
    assert get_message(pets.Fish) is None
    assert get_detailed_message(pets.Fish) == "My fish is named Charles McFish"


def test_documentation(pets):
    assert get_documentation(pets.Cat) == "I eat birds.\n\nAnd fish.\n"
    assert get_documentation(pets.Fish) == "I'm a fish."
    assert get_documentation(pets.Bird) == "I'm a bird."


def test_documentation_from_string_keeps_unindented_lines():
    enum = define_enum("E", [Variant("A", documentation=" one\ntwo")])
    assert get_documentation(enum.A) == "one\ntwo\n"


def test_no_documentation(pets):
    assert get_documentation(pets.Dog) is None


def test_disabled_documentation(pets):
    assert get_documentation(pets.Hamster) is None


def test_no_message(pets):
    assert get_message(pets.Bird) is None
    assert get_detailed_message(pets.Bird) is None


def test_disabled_message(pets):
    assert get_message(pets.Hamster) is None
    assert get_detailed_message(pets.Hamster) is None


def test_get_serializations(brightness):
    assert get_serializations(brightness.DarkBlack) == ("dark-black",)
    assert get_serializations(brightness.Dim(glow=1)) == ("dim",)
    assert get_serializations(brightness.BrightWhite) == ("bright",)


def test_serializations_available_for_disabled(pets):
    assert get_serializations(pets.Hamster) == ("Hamster",)


@pytest.fixture
def props_enum():
    return define_enum("Test", [Variant("A", props={"key": "value"}), Variant("B")])


def test_prop(props_enum):
    assert get_str(props_enum.A, "key") == "value"


def test_prop_not_found(props_enum):
    assert get_str(props_enum.A, "Not Found") is None


def test_prop_not_found_2(props_enum):
    assert get_str(props_enum.B, "key") is None


def test_prop_of_disabled_variant():
    enum = define_enum("T", [Variant("A", props={"key": "value"}, disabled=True)])
    assert get_str(enum.A, "key") is None