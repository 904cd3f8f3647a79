import sys
from datetime import datetime, date
from typing import TypeVar, Any, Type, Optional, Union, Dict, get_args, Literal, get_origin, Callable, Tuple

from dateutil.parser import isoparse

if sys.version_info >= (3, 10):
    from types import UnionType, NoneType
else:
    UnionType = Union
    NoneType = type(None)

import attrs
import cattrs
from cattrs import override
from cattrs.gen import make_dict_unstructure_fn, make_dict_structure_fn

from fix_arm_sdk.enums import ExpandableEnum
from fix_arm_sdk.logger import log
from fix_arm_sdk.types import Json, JsonElement
from fix_arm_sdk.utils import utc_str, to_camel

AnyT = TypeVar("AnyT")

# the global converter instance
__converter = cattrs.Converter()

# base class -> (discriminator wire name, discriminator value -> subclass)
__subtypes: Dict[type, Tuple[str, Dict[str, type]]] = {}


def json_name(attribute: "attrs.Attribute[Any]") -> str:
    """
    The name of the attribute on the wire.
    Defaults to the camel case version of the python name, unless defined explicitly via metadata.
    """
    name: Optional[str] = attribute.metadata.get("json_name")
    return name if name else to_camel(attribute.name)


def __omit_if_default(attribute: "attrs.Attribute[Any]") -> bool:
    # a discriminator with a defined default value is always rendered
    return not (attribute.metadata.get("discriminator", False) and attribute.default is not None)


def __unstructure_fn(cls: Type[Any]) -> Callable[[Any], Json]:
    # absent values are not rendered
    return make_dict_unstructure_fn(  # type: ignore
        cls,
        __converter,
        _cattrs_omit_if_default=True,
        **{a.name: override(rename=json_name(a), omit_if_default=__omit_if_default(a)) for a in attrs.fields(cls)},
    )


def __structure_fn(cls: Type[Any]) -> Callable[[Any, Type[Any]], Any]:
    return make_dict_structure_fn(  # type: ignore
        cls, __converter, **{a.name: override(rename=json_name(a)) for a in attrs.fields(cls)}
    )


__converter.register_unstructure_hook_factory(attrs.has, __unstructure_fn)
__converter.register_structure_hook_factory(attrs.has, __structure_fn)


# work around until this is solved: https://github.com/python-attrs/cattrs/issues/278
def is_primitive_or_primitive_union(t: Any) -> bool:
    if t in (str, bytes, int, float, bool, NoneType):
        return True
    origin = get_origin(t)
    if origin is Literal:
        return True
    if origin in (UnionType, Union):
        return all(is_primitive_or_primitive_union(ty) for ty in get_args(t))
    return False


__converter.register_structure_hook_func(is_primitive_or_primitive_union, lambda v, ty: v)
# open enums: unknown values are kept verbatim
__converter.register_structure_hook(ExpandableEnum, lambda v, ty: ty(v))
__converter.register_unstructure_hook(ExpandableEnum, lambda e: e.value)


def register_json(
    cls: Type[AnyT],
    to_json_fn: Optional[Callable[[AnyT], JsonElement]] = None,
    from_json_fn: Optional[Callable[[Any], AnyT]] = None,
) -> None:
    """
    Register a json marshaller/unmarshaller for the given class.
    :param cls: the class to register
    :param to_json_fn: the function to convert the class to json
    :param from_json_fn: the function to convert json to the class
    """
    log.debug(f"Register json structure hooks for class {cls.__name__}")
    if from_json_fn is not None:
        __converter.register_structure_hook(cls, lambda obj, _: from_json_fn(obj))
    if to_json_fn is not None:
        __converter.register_unstructure_hook(cls, to_json_fn)


def register_subtypes(base: Type[Any], discriminator: str, subtypes: Dict[str, Type[Any]]) -> None:
    """
    Register a polymorphic class hierarchy.
    Reading json into the base class selects the subclass by the value of the discriminator property.
    Unknown discriminator values are read as base class, so the wire value is not lost.
    Writing json always uses the runtime class of the object.
    :param base: the base class of the hierarchy.
    :param discriminator: the wire name of the discriminator property, e.g. @type.
    :param subtypes: discriminator value to subclass.
    """
    __subtypes[base] = (discriminator, subtypes)
    structure_fns: Dict[type, Callable[[Any, Type[Any]], Any]] = {}
    unstructure_fns: Dict[type, Callable[[Any], Json]] = {}

    def structure(js: Any, cls: Type[Any]) -> Any:
        if cls is base and isinstance(js, dict):
            cls = subtypes.get(js.get(discriminator), base)
        if (fn := structure_fns.get(cls)) is None:
            fn = structure_fns[cls] = __structure_fn(cls)
        return fn(js, cls)

    def unstructure(obj: Any) -> Json:
        cls = type(obj)
        if (fn := unstructure_fns.get(cls)) is None:
            fn = unstructure_fns[cls] = __unstructure_fn(cls)
        return fn(obj)

    # registered for the base class, these hooks handle all subclasses as well
    __converter.register_structure_hook(base, structure)
    __converter.register_unstructure_hook(base, unstructure)


def subtypes_of(base: Type[Any]) -> Dict[str, Type[Any]]:
    return __subtypes[base][1] if base in __subtypes else {}


# Register some default types not covered in cattrs
register_json(datetime, utc_str, isoparse)
register_json(date, lambda obj: obj.isoformat(), date.fromisoformat)


def to_json(node: Any) -> Json:
    """
    Use this method, if the given node is known as complex object,
    so the result will be a json object.
    Attributes that are not set are not part of the result.
    """
    unstructured: Json = __converter.unstructure(node)
    return unstructured


def from_json(js: JsonElement, clazz: Type[AnyT]) -> AnyT:
    """
    Loads a json object into a python object.
    :param js: the json object to load.
    :param clazz: the type of the python object.
    :return: the loaded python object.
    """
    try:
        return __converter.structure(js, clazz)
    except Exception as e:
        log.debug(f"Can not deserialize json into class {getattr(clazz, '__name__', clazz)}: {js}. Error: {e}")
        raise
