from hypothesis import given, assume
from hypothesis import strategies as st

from fix_arm_sdk.enums import ExpandableEnum
from fix_arm_sdk.json import from_json, to_json
from fix_arm_sdk.labservices.v2018_10_15.models import EnvironmentSizeName
from fix_arm_sdk.labservices.v2021_11_15_preview.models import VirtualMachineState


class Color(ExpandableEnum):
    RED = "Red"
    DARK_BLUE = "DarkBlue"


def test_known_values() -> None:
    assert Color("Red") is Color.RED
    assert Color.RED == "Red"
    assert str(Color.DARK_BLUE) == "DarkBlue"
    assert not Color.RED.is_unknown
    assert list(Color) == [Color.RED, Color.DARK_BLUE]


def test_names_are_case_insensitive() -> None:
    assert Color["red"] is Color.RED
    assert Color["dark_blue"] is Color.DARK_BLUE
    assert VirtualMachineState["running"] is VirtualMachineState.RUNNING


def test_unknown_value() -> None:
    green = Color.unknown_value("Green")
    assert green.is_unknown
    assert green.value == "Green"
    assert green == "Green"
    assert str(green) == "Green"
    assert isinstance(green, Color)
    # unknown values are never added to the set of members
    assert list(Color) == [Color.RED, Color.DARK_BLUE]
    assert Color.unknown_value("Red") is Color.RED


@given(st.text())
def test_any_value_is_accepted(value: str) -> None:
    assume(value not in ("Red", "DarkBlue"))
    color = Color(value)
    assert color.is_unknown
    assert color.value == value
    assert from_json(value, Color) == value
    assert to_json(color) == value


def test_enums_of_different_versions() -> None:
    assert EnvironmentSizeName("Basic") is EnvironmentSizeName.BASIC
    assert from_json("Performance", EnvironmentSizeName) is EnvironmentSizeName.PERFORMANCE
    assert from_json("Quantum", EnvironmentSizeName).is_unknown
