from enum import Enum
from typing import Any, Optional, Type, TypeVar

from azure.core import CaseInsensitiveEnumMeta

EnumT = TypeVar("EnumT", bound="ExpandableEnum")


class ExpandableEnum(str, Enum, metaclass=CaseInsensitiveEnumMeta):
    """
    Enumeration of string values defined by a service, which is allowed to grow over time.

    Known values are members of the enumeration.
    A value that is not known by this version of the client does not fail:
    it is represented by a member that is not part of the enumeration and carries the value verbatim.

    >>> class Size(ExpandableEnum):
    ...     BASIC = "Basic"
    >>> Size("Basic") is Size.BASIC
    True
    >>> Size("Huge").is_unknown, Size("Huge").value
    (True, 'Huge')
    """

    @classmethod
    def _missing_(cls, value: Any) -> Optional["ExpandableEnum"]:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member

    @classmethod
    def unknown_value(cls: Type[EnumT], value: str) -> EnumT:
        """
        Create a value that is not known to this enumeration.
        Known values are returned as is.
        """
        return cls(value)

    @property
    def is_unknown(self) -> bool:
        return self._value_ not in type(self)._value2member_map_

    def __str__(self) -> str:
        return str(self.value)
