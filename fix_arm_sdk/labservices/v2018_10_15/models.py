from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from attr import define, field

from fix_arm_sdk.enums import ExpandableEnum


class PublishingState(ExpandableEnum):
    """Describes the readiness of this environment setting"""

    DRAFT = "Draft"
    PUBLISHING = "Publishing"
    PUBLISHED = "Published"
    PUBLISH_FAILED = "PublishFailed"
    SCALING = "Scaling"


class EnvironmentSettingPropertiesConfigurationState(ExpandableEnum):
    """Describes the user s progress in configuring their environment setting"""

    NOT_APPLICABLE = "NotApplicable"
    COMPLETED = "Completed"


class EnvironmentSettingPropertiesFragmentConfigurationState(ExpandableEnum):
    """Describes the user s progress in configuring their environment setting"""

    NOT_APPLICABLE = "NotApplicable"
    COMPLETED = "Completed"


class EnvironmentSizeName(ExpandableEnum):
    """The size category"""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


class EnvironmentSizeFragmentName(ExpandableEnum):
    """The size category"""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


class LabPropertiesUserAccessMode(ExpandableEnum):
    """Lab user access mode (open to all vs. restricted to those listed on the lab)."""

    RESTRICTED = "Restricted"
    OPEN = "Open"


class LabPropertiesFragmentUserAccessMode(ExpandableEnum):
    """Lab user access mode (open to all vs. restricted to those listed on the lab)."""

    RESTRICTED = "Restricted"
    OPEN = "Open"


class AddRemove(ExpandableEnum):
    """Enum indicating if user is adding or removing a favorite lab"""

    ADD = "Add"
    REMOVE = "Remove"


class ResourceSettingCreationParametersSize(ExpandableEnum):
    """The size of the virtual machine"""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


class ResourceSettingsSize(ExpandableEnum):
    """The size of the virtual machine"""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


class ResourceSettingsFragmentSize(ExpandableEnum):
    """The size of the virtual machine"""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


class SizeCategory(ExpandableEnum):
    """The category of the size (Basic, Standard, Performance)."""

    BASIC = "Basic"
    STANDARD = "Standard"
    PERFORMANCE = "Performance"


@define
class AddUsersPayload:
    email_addresses: Optional[List[str]] = field(default=None, metadata={"description": "List of user emails addresses to add to the lab."})  # fmt: skip


@define
class CloudError:
    error: Optional[CloudErrorBody] = field(default=None, metadata={"description": "Body of an error from a REST request."})  # fmt: skip


@define
class CloudErrorBody:
    code: Optional[str] = field(default=None)
    message: Optional[str] = field(default=None)
    target: Optional[str] = field(default=None)
    details: Optional[List[CloudErrorBody]] = field(default=None, metadata={"description": "Inner errors."})


@define
class CreateLabProperties:
    environment_setting_creation_parameters: Optional[EnvironmentSettingCreationParameters] = field(default=None, metadata={"description": "Settings related to creating an environment setting"})  # fmt: skip
    lab_creation_parameters: Optional[LabCreationParameters] = field(default=None, metadata={"description": "Settings related to creating a lab"})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource"})
    location: Optional[str] = field(default=None, metadata={"description": "The location of the resource"})
    tags: Optional[Any] = field(default=None, metadata={"description": "The tags of the resource."})


@define
class Resource:
    id: Optional[str] = field(default=None, metadata={"description": "The identifier of the resource."})
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource."})
    type: Optional[str] = field(default=None, metadata={"description": "The type of the resource."})
    location: Optional[str] = field(default=None, metadata={"description": "The location of the resource."})
    tags: Optional[Any] = field(default=None, metadata={"description": "The tags of the resource."})


@define
class Environment(Resource):
    properties: Optional[EnvironmentProperties] = field(default=None, metadata={"description": "Properties of an environment"})  # fmt: skip


@define
class EnvironmentDetails:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the Environment"})
    description: Optional[str] = field(default=None, metadata={"description": "Description of the Environment"})
    id: Optional[str] = field(default=None, metadata={"description": "Resource Id of the environment"})
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning state of the environment. This also includes LabIsFull and NotYetProvisioned status."})  # fmt: skip
    virtual_machine_details: Optional[VirtualMachineDetails] = field(default=None, metadata={"description": "Details of the backing virtual machine."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip
    environment_state: Optional[str] = field(default=None, metadata={"description": "Publishing state of the environment setting Possible values are Creating, Created, Failed"})  # fmt: skip
    total_usage: Optional[str] = field(default=None, metadata={"description": "How long the environment has been used by a lab user"})  # fmt: skip
    password_last_reset: Optional[datetime] = field(default=None, metadata={"description": "When the password was last reset on the environment."})  # fmt: skip


@define
class EnvironmentFragment(Resource):
    properties: Optional[EnvironmentPropertiesFragment] = field(default=None, metadata={"description": "Properties of an environment"})  # fmt: skip


@define
class EnvironmentOperationsPayload:
    environment_id: Optional[str] = field(default=None, metadata={"description": "The resourceId of the environment"})


@define
class EnvironmentProperties:
    resource_sets: Optional[ResourceSet] = field(default=None, metadata={"description": "Represents a VM and the setting Id it was created for."})  # fmt: skip
    claimed_by_user_object_id: Optional[str] = field(default=None, metadata={"description": "The AAD object Id of the user who has claimed the environment"})  # fmt: skip
    claimed_by_user_principal_id: Optional[str] = field(default=None, metadata={"description": "The user principal Id of the user who has claimed the environment"})  # fmt: skip
    claimed_by_user_name: Optional[str] = field(default=None, metadata={"description": "The name or email address of the user who has claimed the environment"})  # fmt: skip
    is_claimed: Optional[bool] = field(default=None, metadata={"description": "Is the environment claimed or not"})
    last_known_power_state: Optional[str] = field(default=None, metadata={"description": "Last known power state of the environment"})  # fmt: skip
    network_interface: Optional[NetworkInterface] = field(default=None, metadata={"description": "Network details of the environment"})  # fmt: skip
    total_usage: Optional[str] = field(default=None, metadata={"description": "How long the environment has been used by a lab user"})  # fmt: skip
    password_last_reset: Optional[datetime] = field(default=None, metadata={"description": "When the password was last reset on the environment."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class EnvironmentPropertiesFragment:
    resource_sets: Optional[ResourceSetFragment] = field(default=None, metadata={"description": "Represents a VM and the setting Id it was created for."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class EnvironmentSetting(Resource):
    properties: Optional[EnvironmentSettingProperties] = field(default=None, metadata={"description": "Properties of an environment setting"})  # fmt: skip


@define
class EnvironmentSettingCreationParameters:
    resource_setting_creation_parameters: Optional[ResourceSettingCreationParameters] = field(default=None, metadata={"description": "Represents resource specific settings"})  # fmt: skip


@define
class EnvironmentSettingFragment(Resource):
    properties: Optional[EnvironmentSettingPropertiesFragment] = field(default=None, metadata={"description": "Properties of an environment setting"})  # fmt: skip


@define
class EnvironmentSettingProperties:
    publishing_state: Optional[PublishingState] = field(default=None, metadata={"description": "Describes the readiness of this environment setting"})  # fmt: skip
    configuration_state: Optional[EnvironmentSettingPropertiesConfigurationState] = field(default=None, metadata={"description": "Describes the user s progress in configuring their environment setting"})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Describes the environment and its resource settings"})  # fmt: skip
    title: Optional[str] = field(default=None, metadata={"description": "Brief title describing the environment and its resource settings"})  # fmt: skip
    resource_settings: Optional[ResourceSettings] = field(default=None, metadata={"description": "Represents resource specific settings"})  # fmt: skip
    last_changed: Optional[datetime] = field(default=None, metadata={"description": "Time when the template VM was last changed."})  # fmt: skip
    last_published: Optional[datetime] = field(default=None, metadata={"description": "Time when the template VM was last sent for publishing."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class EnvironmentSettingPropertiesFragment:
    configuration_state: Optional[EnvironmentSettingPropertiesFragmentConfigurationState] = field(default=None, metadata={"description": "Describes the user s progress in configuring their environment setting"})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Describes the environment and its resource settings"})  # fmt: skip
    title: Optional[str] = field(default=None, metadata={"description": "Brief title describing the environment and its resource settings"})  # fmt: skip
    resource_settings: Optional[ResourceSettingsFragment] = field(default=None, metadata={"description": "Represents resource specific settings"})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class EnvironmentSize:
    name: Optional[EnvironmentSizeName] = field(default=None, metadata={"description": "The size category"})
    vm_sizes: Optional[List[SizeInfo]] = field(default=None, metadata={"description": "Represents a set of compute sizes that can serve this given size type"})  # fmt: skip
    max_price: Optional[float] = field(default=None, metadata={"description": "The pay-as-you-go dollar price per hour this size will cost. It does not include discounts and may not reflect the actual price the size will cost. This is the maximum price of all prices within this tier."})  # fmt: skip
    min_number_of_cores: Optional[int] = field(default=None, metadata={"description": "The number of cores a VM of this size has. This is the minimum number of cores within this tier."})  # fmt: skip
    min_memory: Optional[float] = field(default=None, metadata={"description": "The amount of memory available (in GB). This is the minimum amount of memory within this tier."})  # fmt: skip


@define
class EnvironmentSizeFragment:
    name: Optional[EnvironmentSizeFragmentName] = field(default=None, metadata={"description": "The size category"})
    vm_sizes: Optional[List[SizeInfoFragment]] = field(default=None, metadata={"description": "Represents a set of compute sizes that can serve this given size type"})  # fmt: skip


@define
class GalleryImage(Resource):
    properties: Optional[GalleryImageProperties] = field(default=None, metadata={"description": "The gallery image properties"})  # fmt: skip


@define
class GalleryImageFragment(Resource):
    properties: Optional[GalleryImagePropertiesFragment] = field(default=None, metadata={"description": "The gallery image properties"})  # fmt: skip


@define
class GalleryImageProperties:
    author: Optional[str] = field(default=None, metadata={"description": "The author of the gallery image."})
    created_date: Optional[datetime] = field(default=None, metadata={"description": "The creation date of the gallery image."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "The description of the gallery image."})
    image_reference: Optional[GalleryImageReference] = field(default=None, metadata={"description": "The reference information for an Azure Marketplace image."})  # fmt: skip
    icon: Optional[str] = field(default=None, metadata={"description": "The icon of the gallery image."})
    is_enabled: Optional[bool] = field(default=None, metadata={"description": "Indicates whether this gallery image is enabled."})  # fmt: skip
    is_override: Optional[bool] = field(default=None, metadata={"description": "Indicates whether this gallery has been overridden for this lab account"})  # fmt: skip
    plan_id: Optional[str] = field(default=None, metadata={"description": "The third party plan that applies to this image"})  # fmt: skip
    is_plan_authorized: Optional[bool] = field(default=None, metadata={"description": "Indicates if the plan has been authorized for programmatic deployment."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class GalleryImagePropertiesFragment:
    is_enabled: Optional[bool] = field(default=None, metadata={"description": "Indicates whether this gallery image is enabled."})  # fmt: skip
    is_override: Optional[bool] = field(default=None, metadata={"description": "Indicates whether this gallery has been overridden for this lab account"})  # fmt: skip
    is_plan_authorized: Optional[bool] = field(default=None, metadata={"description": "Indicates if the plan has been authorized for programmatic deployment."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class GalleryImageReference:
    offer: Optional[str] = field(default=None, metadata={"description": "The offer of the gallery image."})
    publisher: Optional[str] = field(default=None, metadata={"description": "The publisher of the gallery image."})
    sku: Optional[str] = field(default=None, metadata={"description": "The SKU of the gallery image."})
    os_type: Optional[str] = field(default=None, metadata={"description": "The OS type of the gallery image."})
    version: Optional[str] = field(default=None, metadata={"description": "The version of the gallery image."})


@define
class GalleryImageReferenceFragment:
    offer: Optional[str] = field(default=None, metadata={"description": "The offer of the gallery image."})
    publisher: Optional[str] = field(default=None, metadata={"description": "The publisher of the gallery image."})
    sku: Optional[str] = field(default=None, metadata={"description": "The SKU of the gallery image."})
    os_type: Optional[str] = field(default=None, metadata={"description": "The OS type of the gallery image."})
    version: Optional[str] = field(default=None, metadata={"description": "The version of the gallery image."})


@define
class GetEnvironmentResponse:
    environment: Optional[EnvironmentDetails] = field(default=None, metadata={"description": "This represents the details about a User s environment and its state."})  # fmt: skip


@define
class GetPersonalPreferencesResponse:
    id: Optional[str] = field(default=None, metadata={"description": "Id to be used by the cache orchestrator"})
    favorite_lab_resource_ids: Optional[List[str]] = field(default=None, metadata={"description": "Array of favorite lab resource ids"})  # fmt: skip


@define
class GetRegionalAvailabilityResponse:
    regional_availability: Optional[List[RegionalAvailability]] = field(default=None, metadata={"description": "Availability information for different size categories per region"})  # fmt: skip


@define
class Lab(Resource):
    properties: Optional[LabProperties] = field(default=None, metadata={"description": "Properties of a Lab."})


@define
class LabAccount(Resource):
    properties: Optional[LabAccountProperties] = field(default=None, metadata={"description": "Properties of a Lab Account."})  # fmt: skip


@define
class LabAccountFragment(Resource):
    properties: Optional[LabAccountPropertiesFragment] = field(default=None, metadata={"description": "Properties of a Lab Account."})  # fmt: skip


@define
class LabAccountProperties:
    size_configuration: Optional[SizeConfigurationProperties] = field(default=None, metadata={"description": "Represents the size configuration under the lab account"})  # fmt: skip
    enabled_region_selection: Optional[bool] = field(default=None, metadata={"description": "Represents if region selection is enabled"})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class LabAccountPropertiesFragment:
    enabled_region_selection: Optional[bool] = field(default=None, metadata={"description": "Represents if region selection is enabled"})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class LabCreationParameters:
    max_users_in_lab: Optional[int] = field(default=None, metadata={"description": "Maximum number of users allowed in the lab."})  # fmt: skip


@define
class LabDetails:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the lab"})
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning state of the lab."})  # fmt: skip
    id: Optional[str] = field(default=None, metadata={"description": "The Id of the lab."})
    usage_quota: Optional[str] = field(default=None, metadata={"description": "The maximum duration a user can use a VM in this lab."})  # fmt: skip


@define
class LabFragment(Resource):
    properties: Optional[LabPropertiesFragment] = field(default=None, metadata={"description": "Properties of a Lab."})


@define
class LabProperties:
    max_users_in_lab: Optional[int] = field(default=None, metadata={"description": "Maximum number of users allowed in the lab."})  # fmt: skip
    user_quota: Optional[int] = field(default=None, metadata={"description": "Maximum value MaxUsersInLab can be set to, as specified by the service"})  # fmt: skip
    invitation_code: Optional[str] = field(default=None, metadata={"description": "Invitation code that users can use to join a lab."})  # fmt: skip
    created_by_object_id: Optional[str] = field(default=None, metadata={"description": "Object id of the user that created the lab."})  # fmt: skip
    usage_quota: Optional[str] = field(default=None, metadata={"description": "Maximum duration a user can use an environment for in the lab."})  # fmt: skip
    user_access_mode: Optional[LabPropertiesUserAccessMode] = field(default=None, metadata={"description": "Lab user access mode (open to all vs. restricted to those listed on the lab)."})  # fmt: skip
    created_by_user_principal_name: Optional[str] = field(default=None, metadata={"description": "Lab creator name"})
    created_date: Optional[datetime] = field(default=None, metadata={"description": "Creation date for the lab"})
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class LabPropertiesFragment:
    max_users_in_lab: Optional[int] = field(default=None, metadata={"description": "Maximum number of users allowed in the lab."})  # fmt: skip
    usage_quota: Optional[str] = field(default=None, metadata={"description": "Maximum duration a user can use an environment for in the lab."})  # fmt: skip
    user_access_mode: Optional[LabPropertiesFragmentUserAccessMode] = field(default=None, metadata={"description": "Lab user access mode (open to all vs. restricted to those listed on the lab)."})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class LatestOperationResult:
    status: Optional[str] = field(default=None, metadata={"description": "The current status of the operation."})
    error_code: Optional[str] = field(default=None, metadata={"description": "Error code on failure."})
    error_message: Optional[str] = field(default=None, metadata={"description": "The error message."})
    request_uri: Optional[str] = field(default=None, metadata={"description": "Request URI of the operation."})
    http_method: Optional[str] = field(default=None, metadata={"description": "The HttpMethod - PUT/POST/DELETE for the operation."})  # fmt: skip
    operation_url: Optional[str] = field(default=None, metadata={"description": "The URL to use to check long-running operation status"})  # fmt: skip


@define
class LatestOperationResultFragment:
    pass


@define
class ListEnvironmentsPayload:
    lab_id: Optional[str] = field(default=None, metadata={"description": "The resource Id of the lab"})


@define
class ListEnvironmentsResponse:
    environments: Optional[List[EnvironmentDetails]] = field(default=None, metadata={"description": "List of all the environments"})  # fmt: skip


@define
class ListLabsResponse:
    labs: Optional[List[LabDetails]] = field(default=None, metadata={"description": "List of all the labs"})


@define
class NetworkInterface:
    private_ip_address: Optional[str] = field(default=None, metadata={"description": "PrivateIp address of the Compute VM"})  # fmt: skip
    ssh_authority: Optional[str] = field(default=None, metadata={"description": "Connection information for Linux"})
    rdp_authority: Optional[str] = field(default=None, metadata={"description": "Connection information for Windows"})
    username: Optional[str] = field(default=None, metadata={"description": "Username of the VM"})


@define
class NetworkInterfaceFragment:
    pass


@define
class OperationBatchStatusPayload:
    urls: Optional[List[str]] = field(default=None, metadata={"description": "The operation url of long running operation"})  # fmt: skip


@define
class OperationBatchStatusResponse:
    items: Optional[List[OperationBatchStatusResponseItem]] = field(default=None, metadata={"description": "Gets a collection of items that contain the operation url and status."})  # fmt: skip


@define
class OperationBatchStatusResponseItem:
    operation_url: Optional[str] = field(default=None, metadata={"description": "status of the long running operation for an environment"})  # fmt: skip
    status: Optional[str] = field(default=None, metadata={"description": "status of the long running operation for an environment"})  # fmt: skip


@define
class OperationError:
    code: Optional[str] = field(default=None, metadata={"description": "The error code of the operation error."})
    message: Optional[str] = field(default=None, metadata={"description": "The error message of the operation error."})


@define
class OperationMetadata:
    name: Optional[str] = field(default=None, metadata={"description": "Operation name: {provider}/{resource}/{operation}"})  # fmt: skip
    display: Optional[OperationMetadataDisplay] = field(default=None, metadata={"description": "The object that describes the operations"})  # fmt: skip


@define
class OperationMetadataDisplay:
    provider: Optional[str] = field(default=None, metadata={"description": "Friendly name of the resource provider"})
    resource: Optional[str] = field(default=None, metadata={"description": "Resource type on which the operation is performed."})  # fmt: skip
    operation: Optional[str] = field(default=None, metadata={"description": "Operation type: read, write, delete, listKeys/action, etc."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Friendly name of the operation"})


@define
class OperationResult:
    status: Optional[str] = field(default=None, metadata={"description": "The operation status."})
    error: Optional[OperationError] = field(default=None, metadata={"description": "Error details for the operation in case of a failure."})  # fmt: skip


@define
class OperationStatusPayload:
    operation_url: Optional[str] = field(default=None, metadata={"description": "The operation url of long running operation"})  # fmt: skip


@define
class OperationStatusResponse:
    status: Optional[str] = field(default=None, metadata={"description": "status of the long running operation for an environment"})  # fmt: skip


@define
class PersonalPreferencesOperationsPayload:
    lab_account_resource_id: Optional[str] = field(default=None, metadata={"description": "Resource Id of the lab account"})  # fmt: skip
    add_remove: Optional[AddRemove] = field(default=None, metadata={"description": "Enum indicating if user is adding or removing a favorite lab"})  # fmt: skip
    lab_resource_id: Optional[str] = field(default=None, metadata={"description": "Resource Id of the lab to add/remove from the favorites list"})  # fmt: skip


@define
class ProviderOperationResult:
    value: Optional[List[OperationMetadata]] = field(default=None, metadata={"description": "List of operations supported by the resource provider."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "URL to get the next set of operation list results if there are any."})  # fmt: skip


@define
class PublishPayload:
    use_existing_image: Optional[bool] = field(default=None, metadata={"description": "Whether to use existing VM custom image when publishing."})  # fmt: skip


@define
class ReferenceVm:
    user_name: Optional[str] = field(default=None, metadata={"description": "The username of the virtual machine"})
    password: Optional[str] = field(default=None, metadata={"description": "The password of the virtual machine. This will be set to null in GET resource API"})  # fmt: skip
    vm_state_details: Optional[VmStateDetails] = field(default=None, metadata={"description": "Details about the state of the reference virtual machine."})  # fmt: skip
    vm_resource_id: Optional[str] = field(default=None, metadata={"description": "VM resource Id for the environment"})


@define
class ReferenceVmCreationParameters:
    user_name: Optional[str] = field(default=None, metadata={"description": "The username of the virtual machine"})
    password: Optional[str] = field(default=None, metadata={"description": "The password of the virtual machine."})


@define
class ReferenceVmFragment:
    user_name: Optional[str] = field(default=None, metadata={"description": "The username of the virtual machine"})
    password: Optional[str] = field(default=None, metadata={"description": "The password of the virtual machine. This will be set to null in GET resource API"})  # fmt: skip


@define
class RegionalAvailability:
    region: Optional[str] = field(default=None, metadata={"description": "Corresponding region"})
    size_availabilities: Optional[List[SizeAvailability]] = field(default=None, metadata={"description": "List of all the size information for the region"})  # fmt: skip


@define
class RegisterPayload:
    registration_code: Optional[str] = field(default=None, metadata={"description": "The registration code of the lab."})  # fmt: skip


@define
class ResetPasswordPayload:
    environment_id: Optional[str] = field(default=None, metadata={"description": "The resourceId of the environment"})
    username: Optional[str] = field(default=None, metadata={"description": "The username for which the password will be reset."})  # fmt: skip
    password: Optional[str] = field(default=None, metadata={"description": "The password to assign to the user specified in"})  # fmt: skip


@define
class ResourceSet:
    vm_resource_id: Optional[str] = field(default=None, metadata={"description": "VM resource Id for the environment"})
    resource_setting_id: Optional[str] = field(default=None, metadata={"description": "resourceSettingId for the environment"})  # fmt: skip


@define
class ResourceSetFragment:
    vm_resource_id: Optional[str] = field(default=None, metadata={"description": "VM resource Id for the environment"})
    resource_setting_id: Optional[str] = field(default=None, metadata={"description": "resourceSettingId for the environment"})  # fmt: skip


@define
class ResourceSettingCreationParameters:
    location: Optional[str] = field(default=None, metadata={"description": "The location where the virtual machine will live"})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource setting"})
    gallery_image_resource_id: Optional[str] = field(default=None, metadata={"description": "The resource id of the gallery image used for creating the virtual machine"})  # fmt: skip
    size: Optional[ResourceSettingCreationParametersSize] = field(default=None, metadata={"description": "The size of the virtual machine"})  # fmt: skip
    reference_vm_creation_parameters: Optional[ReferenceVmCreationParameters] = field(default=None, metadata={"description": "Creation parameters for Reference Vm"})  # fmt: skip


@define
class ResourceSettings:
    id: Optional[str] = field(default=None, metadata={"description": "The unique id of the resource setting"})
    gallery_image_resource_id: Optional[str] = field(default=None, metadata={"description": "The resource id of the gallery image used for creating the virtual machine"})  # fmt: skip
    image_name: Optional[str] = field(default=None, metadata={"description": "The name of the image used to created the environment setting"})  # fmt: skip
    size: Optional[ResourceSettingsSize] = field(default=None, metadata={"description": "The size of the virtual machine"})  # fmt: skip
    cores: Optional[int] = field(default=None, metadata={"description": "The translated compute cores of the virtual machine"})  # fmt: skip
    reference_vm: Optional[ReferenceVm] = field(default=None, metadata={"description": "Details of a Reference Vm"})


@define
class ResourceSettingsFragment:
    gallery_image_resource_id: Optional[str] = field(default=None, metadata={"description": "The resource id of the gallery image used for creating the virtual machine"})  # fmt: skip
    size: Optional[ResourceSettingsFragmentSize] = field(default=None, metadata={"description": "The size of the virtual machine"})  # fmt: skip
    reference_vm: Optional[ReferenceVmFragment] = field(default=None, metadata={"description": "Details of a Reference Vm"})  # fmt: skip


@define
class ResponseWithContinuationEnvironmentSetting:
    value: Optional[List[EnvironmentSetting]] = field(default=None, metadata={"description": "Results of the list operation."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class ResponseWithContinuationEnvironment:
    value: Optional[List[Environment]] = field(default=None, metadata={"description": "Results of the list operation."})
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class ResponseWithContinuationGalleryImage:
    value: Optional[List[GalleryImage]] = field(default=None, metadata={"description": "Results of the list operation."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class ResponseWithContinuationLabAccount:
    value: Optional[List[LabAccount]] = field(default=None, metadata={"description": "Results of the list operation."})
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class ResponseWithContinuationLab:
    value: Optional[List[Lab]] = field(default=None, metadata={"description": "Results of the list operation."})
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class ResponseWithContinuationUser:
    value: Optional[List[User]] = field(default=None, metadata={"description": "Results of the list operation."})
    next_link: Optional[str] = field(default=None, metadata={"description": "Link for next set of results."})


@define
class SizeAvailability:
    size_category: Optional[SizeCategory] = field(default=None, metadata={"description": "The category of the size (Basic, Standard, Performance)."})  # fmt: skip
    is_available: Optional[bool] = field(default=None, metadata={"description": "Whether or not this size category is available"})  # fmt: skip


@define
class SizeConfigurationProperties:
    environment_sizes: Optional[List[EnvironmentSize]] = field(default=None, metadata={"description": "Represents a list of size categories supported by this Lab Account (Small, Medium, Large)"})  # fmt: skip


@define
class SizeConfigurationPropertiesFragment:
    environment_sizes: Optional[List[EnvironmentSizeFragment]] = field(default=None, metadata={"description": "Represents a list of size categories supported by this Lab Account (Small, Medium, Large)"})  # fmt: skip


@define
class SizeInfo:
    compute_size: Optional[str] = field(default=None, metadata={"description": "Represents the actual compute size, e.g. Standard_A2_v2."})  # fmt: skip
    price: Optional[float] = field(default=None, metadata={"description": "The pay-as-you-go price per hour this size will cost. It does not include discounts and may not reflect the actual price the size will cost."})  # fmt: skip
    number_of_cores: Optional[int] = field(default=None, metadata={"description": "The number of cores a VM of this size has."})  # fmt: skip
    memory: Optional[float] = field(default=None, metadata={"description": "The amount of memory available (in GB)."})


@define
class SizeInfoFragment:
    compute_size: Optional[str] = field(default=None, metadata={"description": "Represents the actual compute size, e.g. Standard_A2_v2."})  # fmt: skip
    price: Optional[float] = field(default=None, metadata={"description": "The pay-as-you-go price per hour this size will cost. It does not include discounts and may not reflect the actual price the size will cost."})  # fmt: skip
    number_of_cores: Optional[int] = field(default=None, metadata={"description": "The number of cores a VM of this size has."})  # fmt: skip
    memory: Optional[float] = field(default=None, metadata={"description": "The amount of memory available (in GB)."})


@define
class User(Resource):
    properties: Optional[UserProperties] = field(default=None, metadata={"description": "Lab User properties"})


@define
class UserFragment(Resource):
    properties: Optional[UserPropertiesFragment] = field(default=None, metadata={"description": "Lab User properties"})


@define
class UserProperties:
    email: Optional[str] = field(default=None, metadata={"description": "The user email address, as it was specified during registration."})  # fmt: skip
    family_name: Optional[str] = field(default=None, metadata={"description": "The user family name, as it was specified during registration."})  # fmt: skip
    given_name: Optional[str] = field(default=None, metadata={"description": "The user given name, as it was specified during registration."})  # fmt: skip
    tenant_id: Optional[str] = field(default=None, metadata={"description": "The user tenant ID, as it was specified during registration."})  # fmt: skip
    total_usage: Optional[str] = field(default=None, metadata={"description": "How long the user has used his VMs in this lab"})  # fmt: skip
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip
    latest_operation_result: Optional[LatestOperationResult] = field(default=None, metadata={"description": "Details of the status of an operation."})  # fmt: skip


@define
class UserPropertiesFragment:
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "The provisioning status of the resource."})  # fmt: skip
    unique_identifier: Optional[str] = field(default=None, metadata={"description": "The unique immutable identifier of a resource (Guid)."})  # fmt: skip


@define
class VirtualMachineDetails:
    provisioning_state: Optional[str] = field(default=None, metadata={"description": "Provisioning state of the Dtl VM"})  # fmt: skip
    rdp_authority: Optional[str] = field(default=None, metadata={"description": "Connection information for Windows"})
    ssh_authority: Optional[str] = field(default=None, metadata={"description": "Connection information for Linux"})
    private_ip_address: Optional[str] = field(default=None, metadata={"description": "PrivateIp address of the compute VM"})  # fmt: skip
    user_name: Optional[str] = field(default=None, metadata={"description": "Compute VM login user name"})
    last_known_power_state: Optional[str] = field(default=None, metadata={"description": "Last known compute power state captured in DTL"})  # fmt: skip


@define
class VmStateDetails:
    rdp_authority: Optional[str] = field(default=None, metadata={"description": "The RdpAuthority property is a server DNS host name or IP address followed by the service port number for RDP (Remote Desktop Protocol)."})  # fmt: skip
    ssh_authority: Optional[str] = field(default=None, metadata={"description": "The SshAuthority property is a server DNS host name or IP address followed by the service port number for SSH."})  # fmt: skip
    power_state: Optional[str] = field(default=None, metadata={"description": "The power state of the reference virtual machine."})  # fmt: skip
    last_known_power_state: Optional[str] = field(default=None, metadata={"description": "Last known compute power state captured in DTL"})  # fmt: skip


@define
class VmStateDetailsFragment:
    pass
