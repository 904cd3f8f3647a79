from __future__ import annotations

from typing import ClassVar, Dict, Generic, Optional, TypeVar, Any

from fix_arm_sdk.arm_client import ArmOperation, ArmResponse, NoBody, OperationGroup
from fix_arm_sdk.pager import Pageable
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.models import (
    AccessPolicyEntity,
    AccessPolicyEntityCollection,
    CheckNameAvailabilityRequest,
    CheckNameAvailabilityResponse,
    EdgeModuleEntity,
    EdgeModuleEntityCollection,
    EdgeModuleProvisioningToken,
    ListProvisioningTokenInput,
    LivePipeline,
    LivePipelineCollection,
    LivePipelineOperationStatus,
    LivePipelineUpdate,
    OperationCollection,
    PipelineJob,
    PipelineJobCollection,
    PipelineJobOperationStatus,
    PipelineJobUpdate,
    PipelineTopology,
    PipelineTopologyCollection,
    PipelineTopologyUpdate,
    PrivateEndpointConnection,
    PrivateEndpointConnectionListResult,
    PrivateLinkResource,
    PrivateLinkResourceListResult,
    VideoAnalyzer,
    VideoAnalyzerCollection,
    VideoAnalyzerOperationStatus,
    VideoAnalyzerPrivateEndpointConnectionOperationStatus,
    VideoAnalyzerUpdate,
    VideoContentToken,
    VideoEntity,
    VideoEntityCollection,
)

ApiVersion = "2021-11-01-preview"
TopQuery = {"top": "$top"}
FilterTopQuery = {"filter": "$filter", "top": "$top"}

Subscription = "/subscriptions/{subscription_id}"
Location = Subscription + "/providers/Microsoft.Media/locations/{location_name}"
ResourceGroup = Subscription + "/resourceGroups/{resource_group_name}/providers/Microsoft.Media"
AccountPath = ResourceGroup + "/videoAnalyzers/{account_name}"

EntityT = TypeVar("EntityT")
CollectionT = TypeVar("CollectionT")


def spec(
    method: str,
    path: str,
    responses: Optional[Dict[int, Optional[type]]] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[type] = None,
) -> ArmOperation:
    return ArmOperation(
        service="videoanalyzer",
        method=method,
        path=path,
        version=ApiVersion,
        responses=responses or {200: NoBody},
        query_parameters=query_parameters or {},
        body=body,
    )


class AccountResourceOperations(OperationGroup, Generic[EntityT, CollectionT]):
    """
    Child resources of a video analyzer account: /videoAnalyzers/{account_name}/<collection>/{name}.
    All of them share the same get, create_or_update and delete operations.
    """

    # python name of the path parameter that names a single resource
    name_parameter: ClassVar[str]
    list_spec: ClassVar[ArmOperation]
    get_spec: ClassVar[ArmOperation]
    create_or_update_spec: ClassVar[ArmOperation]
    delete_spec: ClassVar[ArmOperation]

    @staticmethod
    def _paths(collection: str, name_parameter: str) -> Dict[str, str]:
        item = f"{AccountPath}/{collection}/{{{name_parameter}}}"
        return {"list": f"{AccountPath}/{collection}", "item": item}

    def _path_args(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str
    ) -> Dict[str, str]:
        return {
            "subscription_id": subscription_id,
            "resource_group_name": resource_group_name,
            "account_name": account_name,
            self.name_parameter: name,
        }

    def _list(
        self, subscription_id: str, resource_group_name: str, account_name: str, **query: Any
    ) -> Pageable[CollectionT, EntityT]:
        page_type = self.list_spec.responses[200]
        assert page_type is not None, f"No page type defined for {self.list_spec.path}"
        return self.client.pageable(
            self.list_spec,
            page_type,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            **query,
        )

    async def get(self, subscription_id: str, resource_group_name: str, account_name: str, name: str) -> EntityT:
        """Retrieves an existing resource with the given name."""
        return await self.client.call(
            self.get_spec, **self._path_args(subscription_id, resource_group_name, account_name, name)
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str, parameters: EntityT
    ) -> ArmResponse[EntityT]:
        """Creates a new resource or updates an existing one. The status tells, if the resource was created."""
        return await self.client.call(
            self.create_or_update_spec,
            parameters,
            **self._path_args(subscription_id, resource_group_name, account_name, name),
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str
    ) -> ArmResponse[None]:
        """Deletes an existing resource. 204 signals that the resource did not exist."""
        return await self.client.call(
            self.delete_spec, **self._path_args(subscription_id, resource_group_name, account_name, name)
        )


class UpdatableAccountResourceOperations(AccountResourceOperations[EntityT, CollectionT]):
    update_spec: ClassVar[ArmOperation]

    async def update(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str, parameters: Any
    ) -> EntityT:
        """Updates the defined properties of an existing resource. Undefined properties are kept unchanged."""
        return await self.client.call(
            self.update_spec, parameters, **self._path_args(subscription_id, resource_group_name, account_name, name)
        )


class EdgeModulesOperations(AccountResourceOperations[EdgeModuleEntity, EdgeModuleEntityCollection]):
    name_parameter = "edge_module_name"
    paths = AccountResourceOperations._paths("edgeModules", name_parameter)
    list_spec = spec("GET", paths["list"], {200: EdgeModuleEntityCollection}, TopQuery)
    get_spec = spec("GET", paths["item"], {200: EdgeModuleEntity})
    create_or_update_spec = spec(
        "PUT", paths["item"], {200: EdgeModuleEntity, 201: EdgeModuleEntity}, body=EdgeModuleEntity
    )
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})
    list_provisioning_token_spec: ClassVar[ArmOperation] = spec(
        "POST",
        paths["item"] + "/listProvisioningToken",
        {200: EdgeModuleProvisioningToken},
        body=ListProvisioningTokenInput,
    )

    def list(
        self, subscription_id: str, resource_group_name: str, account_name: str, *, top: Optional[int] = None
    ) -> Pageable[EdgeModuleEntityCollection, EdgeModuleEntity]:
        """List all existing edge module resources, along with their JSON representations."""
        return self._list(subscription_id, resource_group_name, account_name, top=top)

    async def list_provisioning_token(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        edge_module_name: str,
        parameters: ListProvisioningTokenInput,
    ) -> EdgeModuleProvisioningToken:
        """
        Creates a new provisioning token.
        A provisioning token allows for a single instance of Azure Video analyzer IoT edge module
        to be initialized and authorized to the cloud account.
        """
        return await self.client.call(
            self.list_provisioning_token_spec,
            parameters,
            **self._path_args(subscription_id, resource_group_name, account_name, edge_module_name),
        )


class PipelineTopologiesOperations(UpdatableAccountResourceOperations[PipelineTopology, PipelineTopologyCollection]):
    name_parameter = "pipeline_topology_name"
    paths = AccountResourceOperations._paths("pipelineTopologies", name_parameter)
    list_spec = spec("GET", paths["list"], {200: PipelineTopologyCollection}, FilterTopQuery)
    get_spec = spec("GET", paths["item"], {200: PipelineTopology})
    create_or_update_spec = spec(
        "PUT", paths["item"], {200: PipelineTopology, 201: PipelineTopology}, body=PipelineTopology
    )
    update_spec = spec("PATCH", paths["item"], {200: PipelineTopology}, body=PipelineTopologyUpdate)
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        *,
        filter: Optional[str] = None,
        top: Optional[int] = None,
    ) -> Pageable[PipelineTopologyCollection, PipelineTopology]:
        """Retrieves a list of pipeline topologies that have been added to the account."""
        return self._list(subscription_id, resource_group_name, account_name, filter=filter, top=top)


class LivePipelinesOperations(UpdatableAccountResourceOperations[LivePipeline, LivePipelineCollection]):
    name_parameter = "live_pipeline_name"
    paths = AccountResourceOperations._paths("livePipelines", name_parameter)
    list_spec = spec("GET", paths["list"], {200: LivePipelineCollection}, FilterTopQuery)
    get_spec = spec("GET", paths["item"], {200: LivePipeline})
    create_or_update_spec = spec("PUT", paths["item"], {200: LivePipeline, 201: LivePipeline}, body=LivePipeline)
    update_spec = spec("PATCH", paths["item"], {200: LivePipeline}, body=LivePipelineUpdate)
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})
    activate_spec: ClassVar[ArmOperation] = spec("POST", paths["item"] + "/activate", {200: NoBody, 202: NoBody})
    deactivate_spec: ClassVar[ArmOperation] = spec("POST", paths["item"] + "/deactivate", {200: NoBody, 202: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        *,
        filter: Optional[str] = None,
        top: Optional[int] = None,
    ) -> Pageable[LivePipelineCollection, LivePipeline]:
        """Retrieves a list of live pipelines that have been created, along with their JSON representations."""
        return self._list(subscription_id, resource_group_name, account_name, filter=filter, top=top)

    async def activate(
        self, subscription_id: str, resource_group_name: str, account_name: str, live_pipeline_name: str
    ) -> ArmResponse[None]:
        """Activates a live pipeline with the given name."""
        return await self.client.call(
            self.activate_spec,
            **self._path_args(subscription_id, resource_group_name, account_name, live_pipeline_name),
        )

    async def deactivate(
        self, subscription_id: str, resource_group_name: str, account_name: str, live_pipeline_name: str
    ) -> ArmResponse[None]:
        """Deactivates a live pipeline with the given name."""
        return await self.client.call(
            self.deactivate_spec,
            **self._path_args(subscription_id, resource_group_name, account_name, live_pipeline_name),
        )


class PipelineJobsOperations(UpdatableAccountResourceOperations[PipelineJob, PipelineJobCollection]):
    name_parameter = "pipeline_job_name"
    paths = AccountResourceOperations._paths("pipelineJobs", name_parameter)
    list_spec = spec("GET", paths["list"], {200: PipelineJobCollection}, FilterTopQuery)
    get_spec = spec("GET", paths["item"], {200: PipelineJob})
    create_or_update_spec = spec("PUT", paths["item"], {200: PipelineJob, 201: PipelineJob}, body=PipelineJob)
    update_spec = spec("PATCH", paths["item"], {200: PipelineJob}, body=PipelineJobUpdate)
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})
    cancel_spec: ClassVar[ArmOperation] = spec("POST", paths["item"] + "/cancel", {200: NoBody, 202: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        *,
        filter: Optional[str] = None,
        top: Optional[int] = None,
    ) -> Pageable[PipelineJobCollection, PipelineJob]:
        """Retrieves a list of all live pipelines that have been created, along with their JSON representations."""
        return self._list(subscription_id, resource_group_name, account_name, filter=filter, top=top)

    async def cancel(
        self, subscription_id: str, resource_group_name: str, account_name: str, pipeline_job_name: str
    ) -> ArmResponse[None]:
        """Cancels a pipeline job with the given name."""
        return await self.client.call(
            self.cancel_spec, **self._path_args(subscription_id, resource_group_name, account_name, pipeline_job_name)
        )


class VideosOperations(UpdatableAccountResourceOperations[VideoEntity, VideoEntityCollection]):
    name_parameter = "video_name"
    paths = AccountResourceOperations._paths("videos", name_parameter)
    list_spec = spec("GET", paths["list"], {200: VideoEntityCollection}, TopQuery)
    get_spec = spec("GET", paths["item"], {200: VideoEntity})
    create_or_update_spec = spec("PUT", paths["item"], {200: VideoEntity, 201: VideoEntity}, body=VideoEntity)
    update_spec = spec("PATCH", paths["item"], {200: VideoEntity}, body=VideoEntity)
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})
    list_content_token_spec: ClassVar[ArmOperation] = spec(
        "POST", paths["item"] + "/listContentToken", {200: VideoContentToken}
    )

    def list(
        self, subscription_id: str, resource_group_name: str, account_name: str, *, top: Optional[int] = None
    ) -> Pageable[VideoEntityCollection, VideoEntity]:
        """Retrieves a list of video resources that have been created, along with their JSON representations."""
        return self._list(subscription_id, resource_group_name, account_name, top=top)

    async def list_content_token(
        self, subscription_id: str, resource_group_name: str, account_name: str, video_name: str
    ) -> VideoContentToken:
        """Generates a streaming token which can be used for accessing content from video content URLs."""
        return await self.client.call(
            self.list_content_token_spec,
            **self._path_args(subscription_id, resource_group_name, account_name, video_name),
        )


class AccessPoliciesOperations(UpdatableAccountResourceOperations[AccessPolicyEntity, AccessPolicyEntityCollection]):
    name_parameter = "access_policy_name"
    paths = AccountResourceOperations._paths("accessPolicies", name_parameter)
    list_spec = spec("GET", paths["list"], {200: AccessPolicyEntityCollection}, TopQuery)
    get_spec = spec("GET", paths["item"], {200: AccessPolicyEntity})
    create_or_update_spec = spec(
        "PUT", paths["item"], {200: AccessPolicyEntity, 201: AccessPolicyEntity}, body=AccessPolicyEntity
    )
    update_spec = spec("PATCH", paths["item"], {200: AccessPolicyEntity}, body=AccessPolicyEntity)
    delete_spec = spec("DELETE", paths["item"], {200: NoBody, 204: NoBody})

    def list(
        self, subscription_id: str, resource_group_name: str, account_name: str, *, top: Optional[int] = None
    ) -> Pageable[AccessPolicyEntityCollection, AccessPolicyEntity]:
        """Retrieves all existing access policy resources, along with their JSON representations."""
        return self._list(subscription_id, resource_group_name, account_name, top=top)


class LivePipelineOperationStatusesOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET",
        AccountPath + "/livePipelines/{live_pipeline_name}/operationStatuses/{operation_id}",
        {200: LivePipelineOperationStatus},
    )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        live_pipeline_name: str,
        operation_id: str,
    ) -> LivePipelineOperationStatus:
        """Get the operation status of a live pipeline."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            live_pipeline_name=live_pipeline_name,
            operation_id=operation_id,
        )


class PipelineJobOperationStatusesOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET",
        AccountPath + "/pipelineJobs/{pipeline_job_name}/operationStatuses/{operation_id}",
        {200: PipelineJobOperationStatus},
    )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        pipeline_job_name: str,
        operation_id: str,
    ) -> PipelineJobOperationStatus:
        """Get the operation status of a pipeline job with the given operationId."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            pipeline_job_name=pipeline_job_name,
            operation_id=operation_id,
        )


class Operations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec("GET", "/providers/Microsoft.Media/operations", {200: OperationCollection})

    async def list(self) -> OperationCollection:
        """Lists all the Media operations."""
        return await self.client.call(self.list_spec)


class VideoAnalyzersOperations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec(
        "GET", ResourceGroup + "/videoAnalyzers", {200: VideoAnalyzerCollection}
    )
    get_spec: ClassVar[ArmOperation] = spec("GET", AccountPath, {200: VideoAnalyzer})
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", AccountPath, {200: VideoAnalyzer, 201: VideoAnalyzer}, body=VideoAnalyzer
    )
    update_spec: ClassVar[ArmOperation] = spec("PATCH", AccountPath, {202: VideoAnalyzer}, body=VideoAnalyzerUpdate)
    delete_spec: ClassVar[ArmOperation] = spec("DELETE", AccountPath, {200: NoBody, 204: NoBody})
    list_by_subscription_spec: ClassVar[ArmOperation] = spec(
        "GET", Subscription + "/providers/Microsoft.Media/videoAnalyzers", {200: VideoAnalyzerCollection}
    )

    async def list(self, subscription_id: str, resource_group_name: str) -> VideoAnalyzerCollection:
        """Lists the Video Analyzer accounts in the specified resource group."""
        return await self.client.call(
            self.list_spec, subscription_id=subscription_id, resource_group_name=resource_group_name
        )

    async def get(self, subscription_id: str, resource_group_name: str, account_name: str) -> VideoAnalyzer:
        """Get the details of the specified Video Analyzer account"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, account_name: str, parameters: VideoAnalyzer
    ) -> ArmResponse[VideoAnalyzer]:
        """Create or update an instance of a Video Analyzer account"""
        return await self.client.call(
            self.create_or_update_spec,
            parameters,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, account_name: str, parameters: VideoAnalyzerUpdate
    ) -> VideoAnalyzer:
        """Updates an existing instance of Video Analyzer account"""
        return await self.client.call(
            self.update_spec,
            parameters,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def delete(self, subscription_id: str, resource_group_name: str, account_name: str) -> ArmResponse[None]:
        """Delete the specified Video Analyzer account"""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def list_by_subscription(self, subscription_id: str) -> VideoAnalyzerCollection:
        """List all Video Analyzer accounts in the specified subscription."""
        return await self.client.call(self.list_by_subscription_spec, subscription_id=subscription_id)


class PrivateLinkResourcesOperations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec(
        "GET", AccountPath + "/privateLinkResources", {200: PrivateLinkResourceListResult}
    )
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", AccountPath + "/privateLinkResources/{name}", {200: PrivateLinkResource}
    )

    async def list(
        self, subscription_id: str, resource_group_name: str, account_name: str
    ) -> PrivateLinkResourceListResult:
        """Get list of group IDs for video analyzer account."""
        return await self.client.call(
            self.list_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def get(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str
    ) -> PrivateLinkResource:
        """Get group ID for video analyzer account."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
        )


class PrivateEndpointConnectionsOperations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec(
        "GET", AccountPath + "/privateEndpointConnections", {200: PrivateEndpointConnectionListResult}
    )
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", AccountPath + "/privateEndpointConnections/{name}", {200: PrivateEndpointConnection}
    )
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT",
        AccountPath + "/privateEndpointConnections/{name}",
        {201: PrivateEndpointConnection},
        body=PrivateEndpointConnection,
    )
    delete_spec: ClassVar[ArmOperation] = spec(
        "DELETE", AccountPath + "/privateEndpointConnections/{name}", {200: NoBody, 204: NoBody}
    )

    async def list(
        self, subscription_id: str, resource_group_name: str, account_name: str
    ) -> PrivateEndpointConnectionListResult:
        """Get all private endpoint connections under video analyzer account."""
        return await self.client.call(
            self.list_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
        )

    async def get(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str
    ) -> PrivateEndpointConnection:
        """Get private endpoint connection under video analyzer account."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
        )

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        name: str,
        parameters: PrivateEndpointConnection,
    ) -> PrivateEndpointConnection:
        """Update private endpoint connection state under video analyzer account."""
        return await self.client.call(
            self.create_or_update_spec,
            parameters,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str
    ) -> ArmResponse[None]:
        """Delete private endpoint connection under video analyzer account."""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
        )


class OperationStatusesOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET",
        AccountPath + "/privateEndpointConnections/{name}/operationStatuses/{operation_id}",
        {200: VideoAnalyzerPrivateEndpointConnectionOperationStatus},
    )

    async def get(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str, operation_id: str
    ) -> VideoAnalyzerPrivateEndpointConnectionOperationStatus:
        """Get private endpoint connection operation status."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
            operation_id=operation_id,
        )


class OperationResultsOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET",
        AccountPath + "/privateEndpointConnections/{name}/operationResults/{operation_id}",
        {200: PrivateEndpointConnection, 202: NoBody},
    )

    async def get(
        self, subscription_id: str, resource_group_name: str, account_name: str, name: str, operation_id: str
    ) -> ArmResponse[PrivateEndpointConnection]:
        """Get private endpoint connection operation result. 202 signals that the operation is still running."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            account_name=account_name,
            name=name,
            operation_id=operation_id,
        )


class VideoAnalyzerOperationStatusesOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", Location + "/videoAnalyzerOperationStatuses/{operation_id}", {200: VideoAnalyzerOperationStatus}
    )

    async def get(self, subscription_id: str, location_name: str, operation_id: str) -> VideoAnalyzerOperationStatus:
        """Get video analyzer operation status."""
        return await self.client.call(
            self.get_spec, subscription_id=subscription_id, location_name=location_name, operation_id=operation_id
        )


class VideoAnalyzerOperationResultsOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", Location + "/videoAnalyzerOperationResults/{operation_id}", {200: VideoAnalyzer, 202: NoBody}
    )

    async def get(self, subscription_id: str, location_name: str, operation_id: str) -> ArmResponse[VideoAnalyzer]:
        """Get video analyzer operation result."""
        return await self.client.call(
            self.get_spec, subscription_id=subscription_id, location_name=location_name, operation_id=operation_id
        )


class LocationsOperations(OperationGroup):
    check_name_availability_spec: ClassVar[ArmOperation] = spec(
        "POST",
        Location + "/checkNameAvailability",
        {200: CheckNameAvailabilityResponse},
        body=CheckNameAvailabilityRequest,
    )

    async def check_name_availability(
        self, subscription_id: str, location_name: str, parameters: CheckNameAvailabilityRequest
    ) -> CheckNameAvailabilityResponse:
        """Checks whether the Video Analyzer resource name is available."""
        return await self.client.call(
            self.check_name_availability_spec, parameters, subscription_id=subscription_id, location_name=location_name
        )
