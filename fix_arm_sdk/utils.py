import re
from datetime import datetime, timezone
from typing import Optional

UTC_Date_Format = "%Y-%m-%dT%H:%M:%SZ"
UTC_Date_Format_Micros = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc() -> datetime:
    return datetime.now(timezone.utc)


def utc_str(dto: Optional[datetime] = None) -> str:
    dt = dto if dto is not None else utc()
    if dt.tzinfo is not None and dt.tzname() != "UTC":
        offset = dt.tzinfo.utcoffset(dt)
        if offset is not None and offset.total_seconds() != 0:
            dt = (dt - offset).replace(tzinfo=timezone.utc)
    # keep sub-second precision if the service sent it
    return dt.strftime(UTC_Date_Format_Micros if dt.microsecond else UTC_Date_Format)


def to_snake(name: str) -> str:
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def to_camel(name: str) -> str:
    """
    Python attribute name to ARM wire name: resource_group_name -> resourceGroupName.
    Leading and trailing underscores are dropped.
    """
    head, *tail = name.strip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)
