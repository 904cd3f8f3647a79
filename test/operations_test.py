import inspect
from string import Formatter
from typing import Any, Dict, List, Tuple, Type
from urllib.parse import parse_qs, urlparse

from pytest import mark

from fix_arm_sdk.arm_client import ArmOperation, ArmServiceClient, OperationGroup
from fix_arm_sdk.labservices.v2018_10_15.client import LabServicesClient as ClassicClient
from fix_arm_sdk.labservices.v2021_11_15_preview.client import LabServicesClient
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.client import VideoAnalyzerClient

# Every operation: "METHOD path-template accepted-status..."
S = "/subscriptions/{subscription_id}"

LS_RG = S + "/resourceGroups/{resource_group_name}/providers/Microsoft.LabServices"
LA = LS_RG + "/labaccounts/{lab_account_name}"
LAB = LA + "/labs/{lab_name}"
ES = LAB + "/environmentsettings/{environment_setting_name}"
ENV = ES + "/environments/{environment_name}"
GU = "/providers/Microsoft.LabServices/users/{user_name}"
GI = LA + "/galleryimages/{gallery_image_name}"
ClassicCatalog = {
    "provider_operations.list": "GET /providers/Microsoft.LabServices/operations 200",
    "global_users.get_environment": f"POST {GU}/getEnvironment 200",
    "global_users.get_operation_batch_status": f"POST {GU}/getOperationBatchStatus 200",
    "global_users.get_operation_status": f"POST {GU}/getOperationStatus 200",
    "global_users.get_personal_preferences": f"POST {GU}/getPersonalPreferences 200",
    "global_users.list_environments": f"POST {GU}/listEnvironments 200",
    "global_users.list_labs": f"POST {GU}/listLabs 200",
    "global_users.register": f"POST {GU}/register 200",
    "global_users.reset_password": f"POST {GU}/resetPassword 200 202",
    "global_users.start_environment": f"POST {GU}/startEnvironment 200 202",
    "global_users.stop_environment": f"POST {GU}/stopEnvironment 200 202",
    "lab_accounts.list_by_subscription": f"GET {S}/providers/Microsoft.LabServices/labaccounts 200",
    "lab_accounts.list_by_resource_group": f"GET {LS_RG}/labaccounts 200",
    "lab_accounts.get": f"GET {LA} 200",
    "lab_accounts.create_or_update": f"PUT {LA} 200 201",
    "lab_accounts.update": f"PATCH {LA} 200",
    "lab_accounts.delete": f"DELETE {LA} 202 204",
    "lab_accounts.create_lab": f"POST {LA}/createLab 200",
    "lab_accounts.get_regional_availability": f"POST {LA}/getRegionalAvailability 200",
    "operations.get": f"GET {S}/providers/Microsoft.LabServices/locations/{{location_name}}/operations/{{operation_name}} 200",  # noqa: E501
    "gallery_images.list": f"GET {LA}/galleryimages 200",
    "gallery_images.get": f"GET {GI} 200",
    "gallery_images.create_or_update": f"PUT {GI} 200 201",
    "gallery_images.update": f"PATCH {GI} 200",
    "gallery_images.delete": f"DELETE {GI} 200 204",
    "labs.list": f"GET {LA}/labs 200",
    "labs.get": f"GET {LAB} 200",
    "labs.create_or_update": f"PUT {LAB} 200 201",
    "labs.update": f"PATCH {LAB} 200",
    "labs.delete": f"DELETE {LAB} 202 204",
    "labs.add_users": f"POST {LAB}/addUsers 200",
    "labs.register": f"POST {LAB}/register 200",
    "environment_settings.list": f"GET {LAB}/environmentsettings 200",
    "environment_settings.get": f"GET {ES} 200",
    "environment_settings.create_or_update": f"PUT {ES} 200 201",
    "environment_settings.update": f"PATCH {ES} 200",
    "environment_settings.delete": f"DELETE {ES} 202 204",
    "environment_settings.claim_any": f"POST {ES}/claimAny 200",
    "environment_settings.publish": f"POST {ES}/publish 200",
    "environment_settings.start": f"POST {ES}/start 200 202",
    "environment_settings.stop": f"POST {ES}/stop 200 202",
    "environments.list": f"GET {ES}/environments 200",
    "environments.get": f"GET {ENV} 200",
    "environments.create_or_update": f"PUT {ENV} 200 201",
    "environments.update": f"PATCH {ENV} 200",
    "environments.delete": f"DELETE {ENV} 202 204",
    "environments.claim": f"POST {ENV}/claim 200",
    "environments.reset_password": f"POST {ENV}/resetPassword 200 202",
    "environments.start": f"POST {ENV}/start 200 202",
    "environments.stop": f"POST {ENV}/stop 200 202",
    "users.list": f"GET {LAB}/users 200",
    "users.get": f"GET {LAB}/users/{{user_name}} 200",
    "users.create_or_update": f"PUT {LAB}/users/{{user_name}} 200 201",
    "users.update": f"PATCH {LAB}/users/{{user_name}} 200",
    "users.delete": f"DELETE {LAB}/users/{{user_name}} 202 204",
}

LS = S + "/providers/Microsoft.LabServices"
LP = LS_RG + "/labPlans/{lab_plan_name}"
L = LS_RG + "/labs/{lab_name}"
VM = L + "/virtualMachines/{virtual_machine_name}"
LabPlansCatalog = {
    "operations.list": "GET /providers/Microsoft.LabServices/operations 200",
    "operation_results.get": f"GET {LS}/operationResults/{{operation_result_id}} 200 204",
    "lab_plans.list_by_subscription": f"GET {LS}/labPlans 200",
    "lab_plans.list_by_resource_group": f"GET {LS_RG}/labPlans 200",
    "lab_plans.get": f"GET {LP} 200",
    "lab_plans.create_or_update": f"PUT {LP} 200 201 202",
    "lab_plans.update": f"PATCH {LP} 200 202",
    "lab_plans.delete": f"DELETE {LP} 200 202 204",
    "lab_plans.save_image": f"POST {LP}/saveImage 200 202",
    "images.list_by_lab_plan": f"GET {LP}/images 200",
    "images.get": f"GET {LP}/images/{{image_name}} 200",
    "images.create_or_update": f"PUT {LP}/images/{{image_name}} 200",
    "images.update": f"PATCH {LP}/images/{{image_name}} 200",
    "labs.list_by_subscription": f"GET {LS}/labs 200",
    "labs.list_by_resource_group": f"GET {LS_RG}/labs 200",
    "labs.get": f"GET {L} 200",
    "labs.create_or_update": f"PUT {L} 200 201 202",
    "labs.update": f"PATCH {L} 200 202",
    "labs.delete": f"DELETE {L} 200 202 204",
    "labs.publish": f"POST {L}/publish 200 202",
    "labs.sync_group": f"POST {L}/syncGroup 200 202",
    "schedules.list_by_lab": f"GET {L}/schedules 200",
    "schedules.get": f"GET {L}/schedules/{{schedule_name}} 200",
    "schedules.create_or_update": f"PUT {L}/schedules/{{schedule_name}} 200 201",
    "schedules.update": f"PATCH {L}/schedules/{{schedule_name}} 200",
    "schedules.delete": f"DELETE {L}/schedules/{{schedule_name}} 200 202 204",
    "users.list_by_lab": f"GET {L}/users 200",
    "users.get": f"GET {L}/users/{{user_name}} 200",
    "users.create_or_update": f"PUT {L}/users/{{user_name}} 200 201 202",
    "users.update": f"PATCH {L}/users/{{user_name}} 200 202",
    "users.delete": f"DELETE {L}/users/{{user_name}} 200 202 204",
    "users.invite": f"POST {L}/users/{{user_name}}/invite 200 202",
    "virtual_machines.list_by_lab": f"GET {L}/virtualMachines 200",
    "virtual_machines.get": f"GET {VM} 200",
    "virtual_machines.start": f"POST {VM}/start 200 202",
    "virtual_machines.stop": f"POST {VM}/stop 200 202",
    "virtual_machines.reimage": f"POST {VM}/reimage 200 202",
    "virtual_machines.redeploy": f"POST {VM}/redeploy 200 202",
    "virtual_machines.reset_password": f"POST {VM}/resetPassword 200 202",
    "skus.list": f"GET {LS}/skus 200",
    "usages.list_by_location": f"GET {LS}/locations/{{location}}/usages 200",
}

VA_RG = S + "/resourceGroups/{resource_group_name}/providers/Microsoft.Media"
VA = VA_RG + "/videoAnalyzers/{account_name}"
LOC = S + "/providers/Microsoft.Media/locations/{location_name}"
EM = VA + "/edgeModules/{edge_module_name}"
PT = VA + "/pipelineTopologies/{pipeline_topology_name}"
LV = VA + "/livePipelines/{live_pipeline_name}"
PJ = VA + "/pipelineJobs/{pipeline_job_name}"
VI = VA + "/videos/{video_name}"
AP = VA + "/accessPolicies/{access_policy_name}"
PE = VA + "/privateEndpointConnections/{name}"
VideoAnalyzerCatalog = {
    "edge_modules.list": f"GET {VA}/edgeModules 200",
    "edge_modules.get": f"GET {EM} 200",
    "edge_modules.create_or_update": f"PUT {EM} 200 201",
    "edge_modules.delete": f"DELETE {EM} 200 204",
    "edge_modules.list_provisioning_token": f"POST {EM}/listProvisioningToken 200",
    "pipeline_topologies.list": f"GET {VA}/pipelineTopologies 200",
    "pipeline_topologies.get": f"GET {PT} 200",
    "pipeline_topologies.create_or_update": f"PUT {PT} 200 201",
    "pipeline_topologies.update": f"PATCH {PT} 200",
    "pipeline_topologies.delete": f"DELETE {PT} 200 204",
    "live_pipelines.list": f"GET {VA}/livePipelines 200",
    "live_pipelines.get": f"GET {LV} 200",
    "live_pipelines.create_or_update": f"PUT {LV} 200 201",
    "live_pipelines.update": f"PATCH {LV} 200",
    "live_pipelines.delete": f"DELETE {LV} 200 204",
    "live_pipelines.activate": f"POST {LV}/activate 200 202",
    "live_pipelines.deactivate": f"POST {LV}/deactivate 200 202",
    "pipeline_jobs.list": f"GET {VA}/pipelineJobs 200",
    "pipeline_jobs.get": f"GET {PJ} 200",
    "pipeline_jobs.create_or_update": f"PUT {PJ} 200 201",
    "pipeline_jobs.update": f"PATCH {PJ} 200",
    "pipeline_jobs.delete": f"DELETE {PJ} 200 204",
    "pipeline_jobs.cancel": f"POST {PJ}/cancel 200 202",
    "live_pipeline_operation_statuses.get": f"GET {LV}/operationStatuses/{{operation_id}} 200",
    "pipeline_job_operation_statuses.get": f"GET {PJ}/operationStatuses/{{operation_id}} 200",
    "operations.list": "GET /providers/Microsoft.Media/operations 200",
    "video_analyzers.list": f"GET {VA_RG}/videoAnalyzers 200",
    "video_analyzers.get": f"GET {VA} 200",
    "video_analyzers.create_or_update": f"PUT {VA} 200 201",
    "video_analyzers.update": f"PATCH {VA} 202",
    "video_analyzers.delete": f"DELETE {VA} 200 204",
    "video_analyzers.list_by_subscription": f"GET {S}/providers/Microsoft.Media/videoAnalyzers 200",
    "private_link_resources.list": f"GET {VA}/privateLinkResources 200",
    "private_link_resources.get": f"GET {VA}/privateLinkResources/{{name}} 200",
    "private_endpoint_connections.list": f"GET {VA}/privateEndpointConnections 200",
    "private_endpoint_connections.get": f"GET {PE} 200",
    "private_endpoint_connections.create_or_update": f"PUT {PE} 201",
    "private_endpoint_connections.delete": f"DELETE {PE} 200 204",
    "operation_statuses.get": f"GET {PE}/operationStatuses/{{operation_id}} 200",
    "operation_results.get": f"GET {PE}/operationResults/{{operation_id}} 200 202",
    "video_analyzer_operation_statuses.get": f"GET {LOC}/videoAnalyzerOperationStatuses/{{operation_id}} 200",
    "video_analyzer_operation_results.get": f"GET {LOC}/videoAnalyzerOperationResults/{{operation_id}} 200 202",
    "locations.check_name_availability": f"POST {LOC}/checkNameAvailability 200",
    "videos.list": f"GET {VA}/videos 200",
    "videos.get": f"GET {VI} 200",
    "videos.create_or_update": f"PUT {VI} 200 201",
    "videos.update": f"PATCH {VI} 200",
    "videos.delete": f"DELETE {VI} 200 204",
    "videos.list_content_token": f"POST {VI}/listContentToken 200",
    "access_policies.list": f"GET {VA}/accessPolicies 200",
    "access_policies.get": f"GET {AP} 200",
    "access_policies.create_or_update": f"PUT {AP} 200 201",
    "access_policies.update": f"PATCH {AP} 200",
    "access_policies.delete": f"DELETE {AP} 200 204",
}

Catalogs: List[Tuple[Type[ArmServiceClient], str, Dict[str, str]]] = [
    (ClassicClient, "2018-10-15", ClassicCatalog),
    (LabServicesClient, "2021-11-15-preview", LabPlansCatalog),
    (VideoAnalyzerClient, "2021-11-01-preview", VideoAnalyzerCatalog),
]


def operation_specs(client_class: Type[ArmServiceClient]) -> Dict[str, ArmOperation]:
    # operation groups only hold the client, no request is sent
    client = client_class(None)  # type: ignore
    result: Dict[str, ArmOperation] = {}
    for group_name, group in vars(client).items():
        if isinstance(group, OperationGroup):
            for name, value in inspect.getmembers(type(group)):
                if name.endswith("_spec") and isinstance(value, ArmOperation):
                    result[f"{group_name}.{name[: -len('_spec')]}"] = value
    return result


class SampleValues(Dict[str, Any]):
    def __missing__(self, key: str) -> str:
        return key.replace("_", "-")


@mark.parametrize("client_class,version,catalog", Catalogs, ids=[version for _, version, _ in Catalogs])
def test_catalog_is_complete(client_class: Type[ArmServiceClient], version: str, catalog: Dict[str, str]) -> None:
    assert sorted(operation_specs(client_class)) == sorted(catalog)


AllOperations = [
    (client, version, name, expected) for client, version, catalog in Catalogs for name, expected in catalog.items()
]


@mark.parametrize("client_class,version,name,expected", AllOperations, ids=[f"{o[1]}-{o[2]}" for o in AllOperations])
def test_operation_request(client_class: Type[ArmServiceClient], version: str, name: str, expected: str) -> None:
    method, template, *statuses = expected.split(" ")
    spec = operation_specs(client_class)[name]
    assert spec.method == method
    assert spec.version == version
    assert sorted(spec.responses) == [int(s) for s in statuses]

    placeholders = SampleValues()
    arguments = {p: placeholders[p] for _, p, _, _ in Formatter().parse(template) if p}
    request = spec.request("https://management.azure.com", **arguments)
    url = urlparse(request.url)
    assert request.method == method
    assert url.path == template.format_map(placeholders)
    assert parse_qs(url.query) == {"api-version": [version]}
