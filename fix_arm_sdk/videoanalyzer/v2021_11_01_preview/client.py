from fix_arm_sdk.arm_client import ArmClient, ArmServiceClient
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.operations import (
    AccessPoliciesOperations,
    EdgeModulesOperations,
    LivePipelineOperationStatusesOperations,
    LivePipelinesOperations,
    LocationsOperations,
    OperationResultsOperations,
    Operations,
    OperationStatusesOperations,
    PipelineJobOperationStatusesOperations,
    PipelineJobsOperations,
    PipelineTopologiesOperations,
    PrivateEndpointConnectionsOperations,
    PrivateLinkResourcesOperations,
    VideoAnalyzerOperationResultsOperations,
    VideoAnalyzerOperationStatusesOperations,
    VideoAnalyzersOperations,
    VideosOperations,
)


class VideoAnalyzerClient(ArmServiceClient):
    """Azure Video Analyzer provided by Microsoft.Media with api version 2021-11-01-preview."""

    def __init__(self, client: ArmClient) -> None:
        super().__init__(client)
        self.edge_modules = EdgeModulesOperations(client)
        self.pipeline_topologies = PipelineTopologiesOperations(client)
        self.live_pipelines = LivePipelinesOperations(client)
        self.pipeline_jobs = PipelineJobsOperations(client)
        self.live_pipeline_operation_statuses = LivePipelineOperationStatusesOperations(client)
        self.pipeline_job_operation_statuses = PipelineJobOperationStatusesOperations(client)
        self.operations = Operations(client)
        self.video_analyzers = VideoAnalyzersOperations(client)
        self.private_link_resources = PrivateLinkResourcesOperations(client)
        self.private_endpoint_connections = PrivateEndpointConnectionsOperations(client)
        self.operation_statuses = OperationStatusesOperations(client)
        self.operation_results = OperationResultsOperations(client)
        self.video_analyzer_operation_statuses = VideoAnalyzerOperationStatusesOperations(client)
        self.video_analyzer_operation_results = VideoAnalyzerOperationResultsOperations(client)
        self.locations = LocationsOperations(client)
        self.videos = VideosOperations(client)
        self.access_policies = AccessPoliciesOperations(client)
