import inspect
from datetime import datetime, timezone
from types import ModuleType
from typing import Any, Dict, List, Type, Union, get_args, get_origin, get_type_hints

import attrs
from pytest import mark

from fix_arm_sdk.enums import ExpandableEnum
from fix_arm_sdk.json import from_json, json_name, to_json
from fix_arm_sdk.labservices.v2018_10_15 import models as classic
from fix_arm_sdk.labservices.v2021_11_15_preview import models as labplans
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview import models as videoanalyzer

Modules = [classic, labplans, videoanalyzer]
SampleTime = datetime(2022, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
# nested models below this depth are left empty, so recursive shapes terminate
MaxDepth = 3


def declared(module: ModuleType) -> List[type]:
    return [c for _, c in inspect.getmembers(module, inspect.isclass) if c.__module__ == module.__name__]


AllEnums = [c for m in Modules for c in declared(m) if issubclass(c, ExpandableEnum)]
AllModels = [c for m in Modules for c in declared(m) if attrs.has(c)]


def type_id(clazz: type) -> str:
    return ".".join(clazz.__module__.split(".")[1:3] + [clazz.__name__])


def sample(tpe: Any, name: str, depth: int) -> Any:
    origin = get_origin(tpe)
    if origin is Union:
        return sample(next(a for a in get_args(tpe) if a is not type(None)), name, depth)
    elif origin is list:
        item = sample(get_args(tpe)[0], name, depth)
        return None if item is None else [item]
    elif origin is dict:
        value = sample(get_args(tpe)[1], name, depth)
        return None if value is None else {"key": value}
    elif tpe is Any:
        return {"name": name, "values": [1, 2]}
    elif isinstance(tpe, type) and issubclass(tpe, ExpandableEnum):
        return next(iter(tpe))
    elif tpe is bool:
        return True
    elif tpe is int:
        return 42
    elif tpe is float:
        return 0.5
    elif tpe is str:
        return f"{name}-value"
    elif tpe is datetime:
        return SampleTime
    elif attrs.has(tpe):
        return populated(tpe, depth + 1) if depth < MaxDepth else None
    raise AssertionError(f"No sample value for {tpe}")


def populated(model: Type[Any], depth: int = 0) -> Any:
    """
    Instance of the model with every property set.
    Discriminators keep their class defined value.
    """
    hints = get_type_hints(model)
    kwargs: Dict[str, Any] = {}
    for attribute in attrs.fields(model):
        if not attribute.metadata.get("discriminator", False):
            kwargs[attribute.name] = sample(hints[attribute.name], attribute.name, depth)
    return model(**kwargs)


def test_all_modules_declare_models() -> None:
    for module in Modules:
        assert any(attrs.has(c) for c in declared(module))
        assert any(issubclass(c, ExpandableEnum) for c in declared(module))


@mark.parametrize("enum", AllEnums, ids=type_id)
def test_enum_round_trip(enum: Type[ExpandableEnum]) -> None:
    assert len(enum) > 0  # type: ignore
    for member in enum:
        assert to_json(member) == member.value
        assert from_json(member.value, enum) is member
        assert not member.is_unknown
    unknown = from_json("NotKnownByThisVersion", enum)
    assert unknown.is_unknown
    assert to_json(unknown) == "NotKnownByThisVersion"


@mark.parametrize("model", AllModels, ids=type_id)
def test_empty_model_round_trip(model: Type[Any]) -> None:
    value = model()
    js = to_json(value)
    # absent properties stay absent: only discriminators with a fixed value are written
    discriminators = {json_name(a) for a in attrs.fields(model) if a.metadata.get("discriminator", False)}
    assert set(js) <= discriminators
    assert from_json(js, model) == value


@mark.parametrize("model", AllModels, ids=type_id)
def test_populated_model_round_trip(model: Type[Any]) -> None:
    value = populated(model)
    js = to_json(value)
    assert set(js) == {json_name(a) for a in attrs.fields(model) if getattr(value, a.name) is not None}
    again = from_json(js, model)
    assert again == value
    assert to_json(again) == js
