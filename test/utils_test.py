from datetime import datetime, timedelta, timezone

from fix_arm_sdk.utils import to_camel, to_snake, utc_str


def test_to_camel() -> None:
    assert to_camel("resource_group_name") == "resourceGroupName"
    assert to_camel("id") == "id"
    assert to_camel("filter_") == "filter"


def test_to_snake() -> None:
    assert to_snake("resourceGroupName") == "resource_group_name"
    assert to_snake("LabServicesSku") == "lab_services_sku"
    assert to_snake("privateIPAddress") == "private_ip_address"


def test_utc_str() -> None:
    assert utc_str(datetime(2021, 11, 18, 10, 40, 51, tzinfo=timezone.utc)) == "2021-11-18T10:40:51Z"
    assert utc_str(datetime(2021, 11, 18, 10, 40, 51, 500000, tzinfo=timezone.utc)) == "2021-11-18T10:40:51.500000Z"
    cet = timezone(timedelta(hours=1))
    assert utc_str(datetime(2021, 11, 18, 11, 40, 51, tzinfo=cet)) == "2021-11-18T10:40:51Z"
