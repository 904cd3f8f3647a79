from http import HTTPStatus

import pytest
from azure.core.exceptions import ResourceNotFoundError
from conftest import FakeArm, StaticCredential, load_json

from fix_arm_sdk.arm_client import ArmClient
from fix_arm_sdk.config import ArmClientConfig
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.client import VideoAnalyzerClient
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.models import (
    AccountEncryptionType,
    CheckNameAvailabilityRequest,
    CheckNameAvailabilityResponseReason,
    EdgeModuleEntity,
    PipelineTopology,
    PipelineTopologyProperties,
    PipelineTopologyUpdate,
    PipelineTopologyPropertiesUpdate,
    RtspSource,
    SourceNodeBase,
    UnsecuredEndpoint,
)
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.operations import (
    EdgeModulesOperations,
    PipelineTopologiesOperations,
)

AccountPath = "/subscriptions/sub1/resourceGroups/rg1/providers/Microsoft.Media/videoAnalyzers/acct1"
TopologyPath = AccountPath + "/pipelineTopologies/topology1"


def test_account_resource_paths() -> None:
    assert EdgeModulesOperations.get_spec.path_parameters == [
        "subscription_id",
        "resource_group_name",
        "account_name",
        "edge_module_name",
    ]
    assert PipelineTopologiesOperations.list_spec.path.endswith("/videoAnalyzers/{account_name}/pipelineTopologies")
    assert PipelineTopologiesOperations.list_spec.query_parameters == {"filter": "$filter", "top": "$top"}
    # edge modules can not be updated
    assert not hasattr(EdgeModulesOperations, "update")


async def test_client_groups(arm_client: ArmClient) -> None:
    client = VideoAnalyzerClient(arm_client)
    assert isinstance(client.edge_modules, EdgeModulesOperations)
    assert client.live_pipeline_operation_statuses.client is arm_client
    assert client.video_analyzer_operation_results.client is arm_client
    assert client.access_policies.client is arm_client


async def test_get_account(arm_server: FakeArm, credential: StaticCredential, arm_config: ArmClientConfig) -> None:
    arm_server.respond("GET", AccountPath, body=load_json("videoanalyzer", "videoAnalyzer"))
    async with VideoAnalyzerClient.create(credential, arm_config) as client:
        account = await client.video_analyzers.get("sub1", "rg1", "acct1")
    assert account.location == "westus"
    assert account.properties is not None
    assert account.properties.encryption is not None
    assert account.properties.encryption.type is AccountEncryptionType.SYSTEM_KEY
    assert arm_server.requests[0].query == {"api-version": "2021-11-01-preview"}


async def test_pipeline_topology(arm_server: FakeArm, arm_client: ArmClient) -> None:
    topology_json = load_json("videoanalyzer", "pipelineTopology")
    arm_server.respond("PUT", TopologyPath, status=201, body=topology_json)
    arm_server.respond("GET", TopologyPath, body=topology_json)
    arm_server.respond("PATCH", TopologyPath, body=topology_json)
    arm_server.respond("DELETE", TopologyPath, status=204)
    topologies = VideoAnalyzerClient(arm_client).pipeline_topologies

    source = RtspSource(name="rtspSource", endpoint=UnsecuredEndpoint(url="rtsp://camera"))
    topology = PipelineTopology(properties=PipelineTopologyProperties(sources=[source]))
    created = await topologies.create_or_update("sub1", "rg1", "acct1", "topology1", topology)
    assert created.status == HTTPStatus.CREATED
    # the polymorphic nodes are written with their discriminator
    assert arm_server.requests_to(TopologyPath)[0].body == {
        "properties": {
            "sources": [
                {
                    "@type": "#Microsoft.VideoAnalyzer.RtspSource",
                    "name": "rtspSource",
                    "endpoint": {"@type": "#Microsoft.VideoAnalyzer.UnsecuredEndpoint", "url": "rtsp://camera"},
                }
            ]
        }
    }

    fetched = await topologies.get("sub1", "rg1", "acct1", "topology1")
    assert fetched.properties is not None
    sources = fetched.properties.sources or []
    assert type(sources[0]) is RtspSource
    assert type(sources[2]) is SourceNodeBase

    update = PipelineTopologyUpdate(properties=PipelineTopologyPropertiesUpdate(description="new"))
    updated = await topologies.update("sub1", "rg1", "acct1", "topology1", update)
    assert isinstance(updated, PipelineTopology)
    assert arm_server.requests_to(TopologyPath)[2].body == {"properties": {"description": "new"}}

    deleted = await topologies.delete("sub1", "rg1", "acct1", "topology1")
    assert deleted.status == HTTPStatus.NO_CONTENT


async def test_list_edge_modules(arm_server: FakeArm, arm_client: ArmClient) -> None:
    path = AccountPath + "/edgeModules"
    first = load_json("videoanalyzer", "edgeModules")
    first["@nextLink"] = f"{path}?$skipToken=2"
    second = {"value": [{"name": "edge2", "properties": {"edgeModuleId": "5b4d7c8f"}}]}
    arm_server.respond("GET", path, body=first)
    arm_server.respond("GET", path, body=second)
    modules = await VideoAnalyzerClient(arm_client).edge_modules.list("sub1", "rg1", "acct1", top=1).to_list()
    assert [m.name for m in modules] == ["edge1", "edge2"]
    assert all(isinstance(m, EdgeModuleEntity) for m in modules)
    first_request, second_request = arm_server.requests_to(path)
    assert first_request.query == {"api-version": "2021-11-01-preview", "$top": "1"}
    assert second_request.query == {"api-version": "2021-11-01-preview", "$top": "1", "$skipToken": "2"}


async def test_live_pipeline_activation(arm_server: FakeArm, arm_client: ArmClient) -> None:
    path = AccountPath + "/livePipelines/pipeline1"
    arm_server.respond("POST", path + "/activate", status=202)
    result = await VideoAnalyzerClient(arm_client).live_pipelines.activate("sub1", "rg1", "acct1", "pipeline1")
    assert result.accepted
    with pytest.raises(ResourceNotFoundError):
        await VideoAnalyzerClient(arm_client).live_pipelines.deactivate("sub1", "rg1", "acct1", "pipeline1")


async def test_check_name_availability(arm_server: FakeArm, arm_client: ArmClient) -> None:
    path = "/subscriptions/sub1/providers/Microsoft.Media/locations/westus/checkNameAvailability"
    arm_server.respond("POST", path, body={"nameAvailable": False, "reason": "AlreadyExists", "message": "taken"})
    request = CheckNameAvailabilityRequest(name="acct1", type="Microsoft.Media/videoAnalyzers")
    response = await VideoAnalyzerClient(arm_client).locations.check_name_availability("sub1", "westus", request)
    assert response.name_available is False
    assert response.reason is CheckNameAvailabilityResponseReason.ALREADY_EXISTS
    assert arm_server.requests[0].body == {"name": "acct1", "type": "Microsoft.Media/videoAnalyzers"}
