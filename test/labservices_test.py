from http import HTTPStatus

from conftest import FakeArm, StaticCredential, load_json

from fix_arm_sdk.arm_client import ArmClient
from fix_arm_sdk.config import ArmClientConfig
from fix_arm_sdk.labservices.v2018_10_15 import client as classic
from fix_arm_sdk.labservices.v2018_10_15.models import (
    LabAccount,
    LabAccountFragment,
    LabAccountPropertiesFragment,
    RegisterPayload,
)
from fix_arm_sdk.labservices.v2021_11_15_preview import client as preview
from fix_arm_sdk.labservices.v2021_11_15_preview.models import (
    Lab,
    LabState,
    LabUpdate,
    LabUpdateProperties,
)

ClassicGroup = "/subscriptions/sub1/resourceGroups/rg1/providers/Microsoft.LabServices"
AccountPath = ClassicGroup + "/labaccounts/acct1"
LabPath = "/subscriptions/sub1/resourceGroups/rg1/providers/Microsoft.LabServices/labs/lab1"


def lab_json() -> dict:
    return {
        "id": LabPath,
        "name": "lab1",
        "type": "Microsoft.LabServices/labs",
        "location": "westus2",
        "properties": {"title": "Intro to Python", "state": "Draft", "provisioningState": "Succeeded"},
    }


async def test_clients_have_all_groups(arm_client: ArmClient) -> None:
    labs = classic.LabServicesClient(arm_client)
    for group in ["provider_operations", "global_users", "lab_accounts", "operations", "gallery_images"]:
        assert getattr(labs, group).client is arm_client
    for group in ["labs", "environment_settings", "environments", "users"]:
        assert getattr(labs, group).client is arm_client
    plans = preview.LabServicesClient(arm_client)
    for group in ["operations", "operation_results", "lab_plans", "images", "labs", "schedules", "users"]:
        assert getattr(plans, group).client is arm_client
    for group in ["virtual_machines", "skus", "usages"]:
        assert getattr(plans, group).client is arm_client


async def test_list_lab_accounts(
    arm_server: FakeArm, credential: StaticCredential, arm_config: ArmClientConfig
) -> None:
    path = "/subscriptions/sub1/providers/Microsoft.LabServices/labaccounts"
    arm_server.respond("GET", path, body=load_json("labservices", "labAccounts"))
    async with classic.LabServicesClient.create(credential, arm_config) as client:
        accounts = await client.lab_accounts.list_by_subscription("sub1", expand="sizeConfiguration", top=10).to_list()
    assert len(accounts) == 1
    account = accounts[0]
    assert isinstance(account, LabAccount)
    assert account.tags == {"env": "test"}
    assert account.properties is not None
    assert account.properties.enabled_region_selection is True
    assert account.properties.latest_operation_result is not None
    assert account.properties.latest_operation_result.http_method == "PUT"
    assert arm_server.requests[0].query == {"api-version": "2018-10-15", "$expand": "sizeConfiguration", "$top": "10"}


async def test_lab_account_lifecycle(arm_server: FakeArm, arm_client: ArmClient) -> None:
    account = load_json("labservices", "labAccounts")["value"][0]
    arm_server.respond("PUT", AccountPath, status=201, body=account)
    arm_server.respond("PATCH", AccountPath, body=account)
    arm_server.respond("DELETE", AccountPath, status=202)
    accounts = classic.LabServicesClient(arm_client).lab_accounts

    created = await accounts.create_or_update("sub1", "rg1", "acct1", LabAccount(location="westus2"))
    assert created.created
    assert created.value is not None and created.value.name == "acct1"
    assert arm_server.requests_to(AccountPath)[0].body == {"location": "westus2"}

    update = LabAccountFragment(properties=LabAccountPropertiesFragment(enabled_region_selection=False))
    updated = await accounts.update("sub1", "rg1", "acct1", update)
    assert isinstance(updated, LabAccount)
    assert arm_server.requests_to(AccountPath)[1].body == {"properties": {"enabledRegionSelection": False}}

    deleted = await accounts.delete("sub1", "rg1", "acct1")
    assert deleted.status == HTTPStatus.ACCEPTED


async def test_global_user_operations(arm_server: FakeArm, arm_client: ArmClient) -> None:
    users = classic.LabServicesClient(arm_client).global_users
    path = "/providers/Microsoft.LabServices/users/student1"
    arm_server.respond("POST", path + "/register")
    arm_server.respond("POST", path + "/listLabs", body={"labs": [{"name": "lab1", "usageQuota": "PT10H"}]})

    assert await users.register("student1", RegisterPayload(registration_code="abc123")) is None
    assert arm_server.requests_to(path + "/register")[0].body == {"registrationCode": "abc123"}
    labs = await users.list_labs("student1")
    assert labs.labs is not None
    assert labs.labs[0].usage_quota == "PT10H"


async def test_lab_operations(arm_server: FakeArm, credential: StaticCredential, arm_config: ArmClientConfig) -> None:
    arm_server.respond("GET", LabPath, body=lab_json())
    arm_server.respond("PATCH", LabPath, status=202, body=lab_json())
    arm_server.respond("POST", LabPath + "/publish", status=202)
    async with preview.LabServicesClient.create(credential, arm_config) as client:
        lab = await client.labs.get("sub1", "rg1", "lab1")
        assert isinstance(lab, Lab)
        assert lab.properties is not None
        assert lab.properties.state is LabState.DRAFT

        update = LabUpdate(properties=LabUpdateProperties(description="Updated"))
        updated = await client.labs.update("sub1", "rg1", "lab1", update)
        assert updated.accepted
        assert isinstance(updated.value, Lab)

        published = await client.labs.publish("sub1", "rg1", "lab1")
        assert published.status == HTTPStatus.ACCEPTED
        assert published.value is None

    assert arm_server.requests_to(LabPath)[1].body == {"properties": {"description": "Updated"}}
    assert {r.query["api-version"] for r in arm_server.requests} == {"2021-11-15-preview"}


async def test_list_labs_by_subscription(arm_server: FakeArm, arm_client: ArmClient) -> None:
    path = "/subscriptions/sub1/providers/Microsoft.LabServices/labs"
    arm_server.respond("GET", path, body={"value": [lab_json()], "nextLink": f"{arm_server.endpoint}{path}2"})
    arm_server.respond("GET", path + "2", body={"value": [lab_json()]})
    labs = preview.LabServicesClient(arm_client).labs
    pages = [page async for page in labs.list_by_subscription("sub1", filter="location eq 'westus2'")]
    assert [len(page.value or []) for page in pages] == [1, 1]
    assert arm_server.requests_to(path + "2")[0].query["$filter"] == "location eq 'westus2'"
