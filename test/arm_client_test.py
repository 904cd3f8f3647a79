import asyncio
from http import HTTPStatus
from urllib.parse import parse_qs, urlparse

import pytest
from azure.core.exceptions import (
    ClientAuthenticationError,
    DecodeError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
)
from conftest import FakeArm, StaticCredential, load_json

from fix_arm_sdk.arm_client import ArmClient, ArmOperation, ArmResponse, CredentialsTokenCache, NoBody, query_value
from fix_arm_sdk.config import ArmClientConfig
from fix_arm_sdk.labservices.v2021_11_15_preview.models import (
    OperationResult,
    ResetPasswordBody,
    VirtualMachine,
    VirtualMachineState,
)
from fix_arm_sdk.labservices.v2021_11_15_preview.operations import (
    OperationResultsOperations,
    VirtualMachinesOperations,
)

VmPath = "/subscriptions/sub1/resourceGroups/rg1/providers/Microsoft.LabServices/labs/lab1/virtualMachines/vm1"
ResultPath = "/subscriptions/sub1/providers/Microsoft.LabServices/operationResults/op1"

search = ArmOperation(
    service="test",
    method="GET",
    path="/subscriptions/{subscription_id}/things/{thing_name}",
    version="2021-01-01",
    responses={200: NoBody},
    query_parameters={"filter": "$filter", "top": "$top", "include_hidden": "includeHidden"},
)


def test_path_parameters() -> None:
    assert search.path_parameters == ["subscription_id", "thing_name"]
    assert VirtualMachinesOperations.get_spec.path_parameters == [
        "subscription_id",
        "resource_group_name",
        "lab_name",
        "virtual_machine_name",
    ]


def test_request_url() -> None:
    request = VirtualMachinesOperations.get_spec.request(
        "https://management.azure.com/",
        subscription_id="sub1",
        resource_group_name="rg1",
        lab_name="lab1",
        virtual_machine_name="vm1",
    )
    assert request.method == "GET"
    assert request.url == f"https://management.azure.com{VmPath}?api-version=2021-11-15-preview"
    assert request.headers["Accept"] == "application/json"


def test_path_values_are_quoted() -> None:
    request = search.request("https://arm", subscription_id="sub 1", thing_name="a/b")
    assert urlparse(request.url).path == "/subscriptions/sub%201/things/a%2Fb"


def test_missing_path_parameter() -> None:
    with pytest.raises(ValueError, match="thing_name"):
        search.request("https://arm", subscription_id="sub1")
    with pytest.raises(ValueError, match="subscription_id"):
        search.request("https://arm", subscription_id="", thing_name="t")


def test_query() -> None:
    assert search.query() == {"api-version": "2021-01-01"}
    assert search.query(filter="name eq 'vm1'", top=10, include_hidden=False) == {
        "api-version": "2021-01-01",
        "$filter": "name%20eq%20%27vm1%27",
        "$top": "10",
        "includeHidden": "false",
    }
    # parameters that are not defined or not set are not sent
    assert search.query(top=None, unknown="foo") == {"api-version": "2021-01-01"}
    assert query_value(True) == "true"
    assert query_value("a&b=c") == "a%26b%3Dc"


async def test_call_reads_body(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", VmPath, body=load_json("labservices", "virtualMachine"))
    vm = await VirtualMachinesOperations(arm_client).get("sub1", "rg1", "lab1", "vm1")
    assert isinstance(vm, VirtualMachine)
    assert vm.properties is not None and vm.properties.state is VirtualMachineState.RUNNING
    request = arm_server.requests_to(VmPath)[0]
    assert request.query == {"api-version": "2021-11-15-preview"}
    assert request.headers["Authorization"] == "Bearer test_token"
    assert "fix-arm-sdk/" in request.headers["User-Agent"]


async def test_query_values_arrive_unchanged(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", "/subscriptions/sub1/things/t1")
    await arm_client.call(search, subscription_id="sub1", thing_name="t1", filter="name eq 'a&b'", top=5)
    assert arm_server.requests[0].query == {"api-version": "2021-01-01", "$filter": "name eq 'a&b'", "$top": "5"}


async def test_call_sends_body(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("POST", VmPath + "/resetPassword", status=202)
    result = await VirtualMachinesOperations(arm_client).reset_password(
        "sub1", "rg1", "lab1", "vm1", ResetPasswordBody(username="student", password="secret")
    )
    assert result == ArmResponse(HTTPStatus.ACCEPTED, None)
    assert result.accepted
    request = arm_server.requests_to(VmPath + "/resetPassword")[0]
    assert request.body == {"username": "student", "password": "secret"}
    assert request.headers["Content-Type"].startswith("application/json")


async def test_action_without_body(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("POST", VmPath + "/start", status=200)
    result = await VirtualMachinesOperations(arm_client).start("sub1", "rg1", "lab1", "vm1")
    assert result.status == HTTPStatus.OK
    assert not result.accepted
    request = arm_server.requests_to(VmPath + "/start")[0]
    assert request.body is None
    assert request.headers["Content-Length"] == "0"


async def test_status_selects_outcome(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", ResultPath, status=200, body=load_json("labservices", "operationResult"))
    arm_server.respond("GET", ResultPath, status=204)
    results = OperationResultsOperations(arm_client)
    done = await results.get("sub1", "op1")
    assert done.status == HTTPStatus.OK
    assert isinstance(done.value, OperationResult)
    assert not done.created
    gone = await results.get("sub1", "op1")
    assert gone.status == HTTPStatus.NO_CONTENT
    assert gone.value is None


@pytest.mark.parametrize(
    "status,error",
    [
        (401, ClientAuthenticationError),
        (404, ResourceNotFoundError),
        (409, ResourceExistsError),
    ],
)
async def test_mapped_errors(arm_server: FakeArm, arm_client: ArmClient, status: int, error: type) -> None:
    body = {"error": {"code": "SomeCode", "message": "Something went wrong"}}
    arm_server.respond("GET", VmPath, status=status, body=body)
    with pytest.raises(error) as ex:
        await VirtualMachinesOperations(arm_client).get("sub1", "rg1", "lab1", "vm1")
    assert ex.value.status_code == status


async def test_unknown_route_not_found(arm_client: ArmClient) -> None:
    with pytest.raises(ResourceNotFoundError):
        await VirtualMachinesOperations(arm_client).get("sub1", "rg1", "lab1", "does_not_exist")


async def test_unexpected_status(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", VmPath, status=500, body={"error": {"code": "InternalError", "message": "boom"}})
    with pytest.raises(HttpResponseError) as ex:
        await VirtualMachinesOperations(arm_client).get("sub1", "rg1", "lab1", "vm1")
    assert type(ex.value) is HttpResponseError
    assert ex.value.status_code == 500
    assert ex.value.error is not None
    assert ex.value.error.code == "InternalError"
    # a status that is not declared is an error, even if it is a success code
    arm_server.respond("POST", VmPath + "/start", status=201)
    with pytest.raises(HttpResponseError):
        await VirtualMachinesOperations(arm_client).start("sub1", "rg1", "lab1", "vm1")


async def test_invalid_body(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", VmPath, text="<html>not json</html>")
    with pytest.raises(DecodeError):
        await VirtualMachinesOperations(arm_client).get("sub1", "rg1", "lab1", "vm1")
    arm_server.respond("GET", ResultPath, body={"startTime": "not a date"})
    with pytest.raises(DecodeError):
        await OperationResultsOperations(arm_client).get("sub1", "op1")


async def test_token_is_cached(arm_server: FakeArm, arm_client: ArmClient, credential: StaticCredential) -> None:
    arm_server.respond("POST", VmPath + "/stop", status=202)
    vms = VirtualMachinesOperations(arm_client)
    await vms.stop("sub1", "rg1", "lab1", "vm1")
    await vms.stop("sub1", "rg1", "lab1", "vm1")
    assert credential.token_requests == [(f"{arm_server.endpoint}/.default",)]


async def test_token_is_refreshed(arm_server: FakeArm, arm_config: ArmClientConfig) -> None:
    # the token expires within the refresh margin
    credential = StaticCredential(expires_in=10)
    arm_config.scopes = ["https://management.core.windows.net//.default"]
    arm_server.respond("POST", VmPath + "/stop", status=202)
    async with ArmClient.create(credential, arm_config) as client:  # type: ignore
        vms = VirtualMachinesOperations(client)
        await vms.stop("sub1", "rg1", "lab1", "vm1")
        await vms.stop("sub1", "rg1", "lab1", "vm1")
    assert credential.token_requests == [("https://management.core.windows.net//.default",)] * 2


async def test_concurrent_token_refresh() -> None:
    credential = StaticCredential(delay=0.05)
    cache = CredentialsTokenCache(credential, ["scope/.default"])  # type: ignore
    tokens = await asyncio.gather(*[cache.token() for _ in range(5)])
    assert tokens == ["test_token"] * 5
    assert credential.token_requests == [("scope/.default",)]


async def test_retry(arm_server: FakeArm, arm_config: ArmClientConfig, credential: StaticCredential) -> None:
    arm_config.retry_total = 2
    arm_config.retry_backoff_factor = 0
    arm_server.respond("GET", VmPath, status=503)
    arm_server.respond("GET", VmPath, body=load_json("labservices", "virtualMachine"))
    async with ArmClient.create(credential, arm_config) as client:  # type: ignore
        vm = await VirtualMachinesOperations(client).get("sub1", "rg1", "lab1", "vm1")
    assert vm.name == "vm1"
    assert len(arm_server.requests_to(VmPath)) == 2


async def test_next_page_request(arm_client: ArmClient) -> None:
    params = VirtualMachinesOperations.list_by_lab_spec.query(filter="x")

    def query_of(link: str) -> dict:
        return parse_qs(urlparse(arm_client.next_page_request(link, params).url).query)

    # relative links are resolved against the endpoint
    request = arm_client.next_page_request("/subscriptions/sub1/vms?$skipToken=abc", params)
    assert request.method == "GET"
    assert request.url.startswith(arm_client.endpoint + "/subscriptions/sub1/vms?")
    assert query_of("/subscriptions/sub1/vms?$skipToken=abc") == {
        "$skipToken": ["abc"],
        "api-version": ["2021-11-15-preview"],
        "$filter": ["x"],
    }
    # parameters defined in the link are not repeated or overridden
    assert query_of("https://other/vms?api-version=2020-01-01&$skipToken=abc") == {
        "api-version": ["2020-01-01"],
        "$skipToken": ["abc"],
        "$filter": ["x"],
    }
    absolute = arm_client.next_page_request("https://other/vms?api-version=2020-01-01", params)
    assert absolute.url.startswith("https://other/vms?")
