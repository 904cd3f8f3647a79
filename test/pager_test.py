from typing import List

import pytest
from azure.core.exceptions import ResourceNotFoundError
from conftest import FakeArm, load_json

from fix_arm_sdk.arm_client import ArmClient
from fix_arm_sdk.labservices.v2021_11_15_preview.models import PagedVirtualMachines, VirtualMachine
from fix_arm_sdk.labservices.v2021_11_15_preview.operations import VirtualMachinesOperations

VmsPath = "/subscriptions/sub1/resourceGroups/rg1/providers/Microsoft.LabServices/labs/lab1/virtualMachines"


def two_pages(arm_server: FakeArm) -> None:
    vm1, vm2 = load_json("labservices", "virtualMachines")["value"]
    arm_server.respond("GET", VmsPath, body={"value": [vm1], "nextLink": "/page/2?$skipToken=abc"})
    arm_server.respond("GET", "/page/2", body={"value": [vm2]})


async def test_nothing_requested_before_iteration(arm_server: FakeArm, arm_client: ArmClient) -> None:
    two_pages(arm_server)
    pageable = VirtualMachinesOperations(arm_client).list_by_lab("sub1", "rg1", "lab1")
    assert arm_server.requests == []
    pages: List[PagedVirtualMachines] = [page async for page in pageable]
    assert len(pages) == 2
    assert [r.path for r in arm_server.requests] == [VmsPath, "/page/2"]


async def test_pages_follow_next_link(arm_server: FakeArm, arm_client: ArmClient) -> None:
    two_pages(arm_server)
    vms = VirtualMachinesOperations(arm_client)
    pageable = vms.list_by_lab("sub1", "rg1", "lab1", filter="properties/state ne 'x'")
    first, second = [page async for page in pageable.by_page()]
    assert first.next_link == "/page/2?$skipToken=abc"
    assert second.next_link is None
    first_request, second_request = arm_server.requests
    assert first_request.query == {"api-version": "2021-11-15-preview", "$filter": "properties/state ne 'x'"}
    # the query of the first request is carried to the next page
    assert second_request.query == {
        "$skipToken": "abc",
        "api-version": "2021-11-15-preview",
        "$filter": "properties/state ne 'x'",
    }
    assert second_request.headers["Authorization"] == "Bearer test_token"


async def test_items(arm_server: FakeArm, arm_client: ArmClient) -> None:
    two_pages(arm_server)
    vms = [vm async for vm in VirtualMachinesOperations(arm_client).list_by_lab("sub1", "rg1", "lab1").items()]
    assert [vm.name for vm in vms] == ["vm1", "vm2"]
    assert all(isinstance(vm, VirtualMachine) for vm in vms)


async def test_iteration_restarts(arm_server: FakeArm, arm_client: ArmClient) -> None:
    vm1, vm2 = load_json("labservices", "virtualMachines")["value"]
    arm_server.respond("GET", VmsPath, body={"value": [vm1, vm2]})
    pageable = VirtualMachinesOperations(arm_client).list_by_lab("sub1", "rg1", "lab1")
    assert [vm.name for vm in await pageable.to_list()] == ["vm1", "vm2"]
    assert [vm.name for vm in await pageable.to_list()] == ["vm1", "vm2"]
    assert len(arm_server.requests_to(VmsPath)) == 2


async def test_empty_pages(arm_server: FakeArm, arm_client: ArmClient) -> None:
    arm_server.respond("GET", VmsPath, body={"nextLink": f"{arm_server.endpoint}/page/2"})
    arm_server.respond("GET", "/page/2", body={"value": []})
    assert await VirtualMachinesOperations(arm_client).list_by_lab("sub1", "rg1", "lab1").to_list() == []
    assert len(arm_server.requests) == 2


async def test_error_on_next_page(arm_server: FakeArm, arm_client: ArmClient) -> None:
    vm1 = load_json("labservices", "virtualMachines")["value"][0]
    arm_server.respond("GET", VmsPath, body={"value": [vm1], "nextLink": "/does/not/exist"})
    received: List[VirtualMachine] = []
    with pytest.raises(ResourceNotFoundError):
        async for vm in VirtualMachinesOperations(arm_client).list_by_lab("sub1", "rg1", "lab1").items():
            received.append(vm)
    # elements of the first page are delivered before the error is raised
    assert [vm.name for vm in received] == ["vm1"]
