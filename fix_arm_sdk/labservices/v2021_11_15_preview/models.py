from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from attr import define, field

from fix_arm_sdk.enums import ExpandableEnum


class InvitationState(ExpandableEnum):
    """The lab user invitation state."""

    NOT_SENT = "NotSent"
    SENDING = "Sending"
    SENT = "Sent"
    FAILED = "Failed"


class LabServicesSkuTier(ExpandableEnum):
    """The tier of the SKU."""

    STANDARD = "Standard"
    PREMIUM = "Premium"


class LabServicesSkuCapacityScaleType(ExpandableEnum):
    """The localized name of the resource."""

    NONE = "None"
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"


class LabServicesSkuRestrictionsType(ExpandableEnum):
    """The type of restriction."""

    LOCATION = "Location"


class LabServicesSkuRestrictionsReasonCode(ExpandableEnum):
    """The reason for the restriction."""

    QUOTA_ID = "QuotaId"
    NOT_AVAILABLE_FOR_SUBSCRIPTION = "NotAvailableForSubscription"


class LabState(ExpandableEnum):
    """The state of a virtual machine."""

    DRAFT = "Draft"
    PUBLISHING = "Publishing"
    SCALING = "Scaling"
    SYNCING = "Syncing"
    PUBLISHED = "Published"


class OperationOrigin(ExpandableEnum):
    USER = "user"
    SYSTEM = "system"
    USER_SYSTEM = "user,system"


class OperationActionType(ExpandableEnum):
    """Enum. Indicates the action type. Internal refers to actions that are for internal only APIs."""

    INTERNAL = "Internal"


class OperationResultStatus(ExpandableEnum):
    """The operation status"""

    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class RecurrenceFrequency(ExpandableEnum):
    """Schedule recurrence frequencies."""

    DAILY = "Daily"
    WEEKLY = "Weekly"


class RegistrationState(ExpandableEnum):
    """The user lab registration state."""

    NOT_REGISTERED = "NotRegistered"
    REGISTERED = "Registered"


class SkuTier(ExpandableEnum):
    FREE = "Free"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class UsageUnit(ExpandableEnum):
    """The unit details."""

    COUNT = "Count"


class VirtualMachineProfileCreateOption(ExpandableEnum):
    """Indicates what lab virtual machines are created from."""

    IMAGE = "Image"
    TEMPLATE_VM = "TemplateVM"


class VirtualMachineState(ExpandableEnum):
    """The state of a virtual machine."""

    STOPPED = "Stopped"
    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"
    RESETTING_PASSWORD = "ResettingPassword"
    REIMAGING = "Reimaging"
    REDEPLOYING = "Redeploying"


class VirtualMachineType(ExpandableEnum):
    """The type of the lab virtual machine."""

    USER = "User"
    TEMPLATE = "Template"


class WeekDay(ExpandableEnum):
    """Days of the week."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class ConnectionType(ExpandableEnum):
    """A connection type for access labs and VMs (Public, Private or None)."""

    PUBLIC = "Public"
    PRIVATE = "Private"
    NONE = "None"


class EnableState(ExpandableEnum):
    """Property enabled state."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class OsState(ExpandableEnum):
    """The operating system state."""

    GENERALIZED = "Generalized"
    SPECIALIZED = "Specialized"


class OsType(ExpandableEnum):
    """The operating system type."""

    WINDOWS = "Windows"
    LINUX = "Linux"


class ProvisioningState(ExpandableEnum):
    """Resource provisioning state."""

    CREATING = "Creating"
    UPDATING = "Updating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    LOCKED = "Locked"


class ShutdownOnIdleMode(ExpandableEnum):
    """Defines whether to shut down VM on idle and the criteria for idle detection."""

    NONE = "None"
    USER_ABSENCE = "UserAbsence"
    LOW_USAGE = "LowUsage"


class CreatedByType(ExpandableEnum):
    """The type of identity that created the resource."""

    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class LastModifiedByType(ExpandableEnum):
    """The type of identity that last modified the resource."""

    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


@define
class AutoShutdownProfile:
    shutdown_on_disconnect: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})  # fmt: skip
    shutdown_when_not_connected: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})  # fmt: skip
    shutdown_on_idle: Optional[ShutdownOnIdleMode] = field(default=None, metadata={"description": "Defines whether to shut down VM on idle and the criteria for idle detection."})  # fmt: skip
    disconnect_delay: Optional[str] = field(default=None, metadata={"description": "The amount of time a VM will stay running after a user disconnects if this behavior is enabled."})  # fmt: skip
    no_connect_delay: Optional[str] = field(default=None, metadata={"description": "The amount of time a VM will stay running before it is shutdown if no connection is made and this behavior is enabled."})  # fmt: skip
    idle_delay: Optional[str] = field(default=None, metadata={"description": "The amount of time a VM will idle before it is shutdown if this behavior is enabled."})  # fmt: skip


@define
class ConnectionProfile:
    web_ssh_access: Optional[ConnectionType] = field(default=None, metadata={"description": "A connection type for access labs and VMs (Public, Private or None)."})  # fmt: skip
    web_rdp_access: Optional[ConnectionType] = field(default=None, metadata={"description": "A connection type for access labs and VMs (Public, Private or None)."})  # fmt: skip
    client_ssh_access: Optional[ConnectionType] = field(default=None, metadata={"description": "A connection type for access labs and VMs (Public, Private or None)."})  # fmt: skip
    client_rdp_access: Optional[ConnectionType] = field(default=None, metadata={"description": "A connection type for access labs and VMs (Public, Private or None)."})  # fmt: skip


@define
class Credentials:
    username: Optional[str] = field(default=None, metadata={"description": "The username to use when signing in to lab VMs."})  # fmt: skip
    password: Optional[str] = field(default=None, metadata={"description": "The password for the user. This is required for the TemplateVM createOption."})  # fmt: skip


@define
class ErrorAdditionalInfo:
    type: Optional[str] = field(default=None, metadata={"description": "The additional info type."})
    info: Optional[Any] = field(default=None, metadata={"description": "The additional info."})


@define
class ErrorDetail:
    code: Optional[str] = field(default=None, metadata={"description": "The error code."})
    message: Optional[str] = field(default=None, metadata={"description": "The error message."})
    target: Optional[str] = field(default=None, metadata={"description": "The error target."})
    details: Optional[List[ErrorDetail]] = field(default=None, metadata={"description": "The error details."})
    additional_info: Optional[List[ErrorAdditionalInfo]] = field(default=None, metadata={"description": "The error additional info."})  # fmt: skip


@define
class ErrorResponse:
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class Resource:
    id: Optional[str] = field(default=None, metadata={"description": "Fully qualified resource ID for the resource. Ex - /subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/{resourceProviderNamespace}/{resourceType}/{resourceName}"})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource"})
    type: Optional[str] = field(default=None, metadata={"description": "The type of the resource. E.g. Microsoft.Compute/virtualMachines or Microsoft.Storage/storageAccounts"})  # fmt: skip


@define
class ProxyResource(Resource):
    pass


@define
class Image(ProxyResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[ImageProperties] = field(default=None, metadata={"description": "Properties of an image resource."})  # fmt: skip


@define
class ImageUpdateProperties:
    enabled_state: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})


@define
class ImageProperties(ImageUpdateProperties):
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "The image display name."})
    description: Optional[str] = field(default=None, metadata={"description": "A description of the image."})
    icon_url: Optional[str] = field(default=None, metadata={"description": "URL of the image icon."})
    author: Optional[str] = field(default=None, metadata={"description": "The image author."})
    os_type: Optional[OsType] = field(default=None, metadata={"description": "The operating system type."})
    plan: Optional[str] = field(default=None, metadata={"description": "The ID of marketplace plan associated with the image (optional)."})  # fmt: skip
    terms_status: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})
    offer: Optional[str] = field(default=None, metadata={"description": "The ID of an offer associated with the image."})  # fmt: skip
    publisher: Optional[str] = field(default=None, metadata={"description": "The ID of the publisher of the image."})
    sku: Optional[str] = field(default=None, metadata={"description": "The image SKU."})
    version: Optional[str] = field(default=None, metadata={"description": "The image version."})
    shared_gallery_id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    available_regions: Optional[List[str]] = field(default=None, metadata={"description": "The available regions of the image in the shared gallery."})  # fmt: skip
    os_state: Optional[OsState] = field(default=None, metadata={"description": "The operating system state."})


@define
class ImageReference:
    id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    offer: Optional[str] = field(default=None, metadata={"description": "The image offer if applicable."})
    publisher: Optional[str] = field(default=None, metadata={"description": "The image publisher"})
    sku: Optional[str] = field(default=None, metadata={"description": "The image SKU"})
    version: Optional[str] = field(default=None, metadata={"description": "The image version specified on creation."})
    exact_version: Optional[str] = field(default=None, metadata={"description": "The actual version of the image after use."})  # fmt: skip


@define
class ImageUpdate:
    properties: Optional[ImageUpdateProperties] = field(default=None, metadata={"description": "Properties of an image resource update"})  # fmt: skip


@define
class InviteBody:
    text: Optional[str] = field(default=None, metadata={"description": "Custom text for the invite email."})


@define
class TrackedResource(Resource):
    tags: Optional[Any] = field(default=None, metadata={"description": "Resource tags."})
    location: Optional[str] = field(default=None, metadata={"description": "The geo-location where the resource lives"})


@define
class Lab(TrackedResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[LabProperties] = field(default=None, metadata={"description": "Properties of a lab resource."})


@define
class LabNetworkProfile:
    subnet_id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    load_balancer_id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    public_ip_id: Optional[str] = field(default=None, metadata={"description": "A URL."})


@define
class LabPlan(TrackedResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[LabPlanProperties] = field(default=None, metadata={"description": "Lab plan resource properties"})  # fmt: skip


@define
class LabPlanNetworkProfile:
    subnet_id: Optional[str] = field(default=None, metadata={"description": "A URL."})


@define
class LabPlanUpdateProperties:
    default_connection_profile: Optional[ConnectionProfile] = field(default=None, metadata={"description": "Connection profile for how users connect to lab virtual machines."})  # fmt: skip
    default_auto_shutdown_profile: Optional[AutoShutdownProfile] = field(default=None, metadata={"description": "Profile for how to handle shutting down virtual machines."})  # fmt: skip
    default_network_profile: Optional[LabPlanNetworkProfile] = field(default=None, metadata={"description": "Profile for how to handle networking for Lab Plans."})  # fmt: skip
    allowed_regions: Optional[List[str]] = field(default=None, metadata={"description": "The allowed regions for the lab creator to use when creating labs using this lab plan."})  # fmt: skip
    shared_gallery_id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    support_info: Optional[SupportInfo] = field(default=None, metadata={"description": "Support contact information and instructions."})  # fmt: skip
    linked_lms_instance: Optional[str] = field(default=None, metadata={"description": "A URL."})


@define
class LabPlanProperties(LabPlanUpdateProperties):
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip


@define
class TrackedResourceUpdate:
    tags: Optional[List[str]] = field(default=None, metadata={"description": "Resource tags."})


@define
class LabPlanUpdate(TrackedResourceUpdate):
    properties: Optional[LabPlanUpdateProperties] = field(default=None, metadata={"description": "Lab plan resource properties for updates"})  # fmt: skip


@define
class LabUpdateProperties:
    auto_shutdown_profile: Optional[AutoShutdownProfile] = field(default=None, metadata={"description": "Profile for how to handle shutting down virtual machines."})  # fmt: skip
    connection_profile: Optional[ConnectionProfile] = field(default=None, metadata={"description": "Connection profile for how users connect to lab virtual machines."})  # fmt: skip
    virtual_machine_profile: Optional[VirtualMachineProfile] = field(default=None, metadata={"description": "The base virtual machine configuration for a lab."})  # fmt: skip
    security_profile: Optional[SecurityProfile] = field(default=None, metadata={"description": "The lab security profile."})  # fmt: skip
    roster_profile: Optional[RosterProfile] = field(default=None, metadata={"description": "The lab user list management profile."})  # fmt: skip
    lab_plan_id: Optional[str] = field(default=None, metadata={"description": "A URL."})
    title: Optional[str] = field(default=None, metadata={"description": "The title of the lab."})
    description: Optional[str] = field(default=None, metadata={"description": "The description of the lab."})


@define
class LabProperties(LabUpdateProperties):
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip
    network_profile: Optional[LabNetworkProfile] = field(default=None, metadata={"description": "Profile for how to handle networking for Labs."})  # fmt: skip
    state: Optional[LabState] = field(default=None, metadata={"description": "The state of a virtual machine."})


@define
class LabServicesSku:
    resource_type: Optional[str] = field(default=None, metadata={"description": "The lab services resource type."})
    name: Optional[str] = field(default=None, metadata={"description": "The name of the SKU."})
    tier: Optional[LabServicesSkuTier] = field(default=None, metadata={"description": "The tier of the SKU."})
    size: Optional[str] = field(default=None, metadata={"description": "The SKU size."})
    family: Optional[str] = field(default=None, metadata={"description": "The family of the SKU."})
    capacity: Optional[LabServicesSkuCapacity] = field(default=None, metadata={"description": "The scale out/in options of the SKU."})  # fmt: skip
    capabilities: Optional[List[LabServicesSkuCapabilities]] = field(default=None, metadata={"description": "The capabilities of the SKU."})  # fmt: skip
    locations: Optional[List[str]] = field(default=None, metadata={"description": "List of locations that are available for a size."})  # fmt: skip
    costs: Optional[List[LabServicesSkuCost]] = field(default=None, metadata={"description": "Metadata for retrieving price info of a lab services SKUs."})  # fmt: skip
    restrictions: Optional[List[LabServicesSkuRestrictions]] = field(default=None, metadata={"description": "Restrictions of a lab services SKUs."})  # fmt: skip


@define
class LabServicesSkuCapabilities:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the capability for a SKU."})
    value: Optional[str] = field(default=None, metadata={"description": "The value of the capability for a SKU."})


@define
class LabServicesSkuCapacity:
    default: Optional[int] = field(default=None, metadata={"description": "The default capacity for this resource."})
    minimum: Optional[int] = field(default=None, metadata={"description": "The lowest permitted capacity for this resource."})  # fmt: skip
    maximum: Optional[int] = field(default=None, metadata={"description": "The highest permitted capacity for this resource."})  # fmt: skip
    scale_type: Optional[LabServicesSkuCapacityScaleType] = field(default=None, metadata={"description": "The localized name of the resource."})  # fmt: skip


@define
class LabServicesSkuCost:
    meter_id: Optional[str] = field(default=None, metadata={"description": "The meter id."})
    quantity: Optional[float] = field(default=None, metadata={"description": "The quantity of units charged."})
    extended_unit: Optional[str] = field(default=None, metadata={"description": "The extended unit."})


@define
class LabServicesSkuRestrictions:
    type: Optional[LabServicesSkuRestrictionsType] = field(default=None, metadata={"description": "The type of restriction."})  # fmt: skip
    values: Optional[List[str]] = field(default=None, metadata={"description": "The values of the restriction."})
    reason_code: Optional[LabServicesSkuRestrictionsReasonCode] = field(default=None, metadata={"description": "The reason for the restriction."})  # fmt: skip


@define
class LabUpdate(TrackedResourceUpdate):
    properties: Optional[LabUpdateProperties] = field(default=None, metadata={"description": "Properties of a lab resource used for updates."})  # fmt: skip


@define
class ListUsagesResult:
    value: Optional[List[Usage]] = field(default=None, metadata={"description": "The array page of Usages."})
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of Usage result."})  # fmt: skip


@define
class Operation:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the operation, as per Resource-Based Access Control (RBAC). Examples: Microsoft.Compute/virtualMachines/write , Microsoft.Compute/virtualMachines/capture/action"})  # fmt: skip
    is_data_action: Optional[bool] = field(default=None, metadata={"description": "Whether the operation applies to data-plane. This is true for data-plane operations and false for ARM/control-plane operations."})  # fmt: skip
    display: Optional[OperationDisplay] = field(default=None, metadata={"description": "Localized display information for this particular operation."})  # fmt: skip
    origin: Optional[OperationOrigin] = field(default=None, metadata={"description": "The intended executor of the operation; as in Resource Based Access Control (RBAC) and audit logs UX. Default value is user,system"})  # fmt: skip
    action_type: Optional[OperationActionType] = field(default=None, metadata={"description": "Enum. Indicates the action type. Internal refers to actions that are for internal only APIs."})  # fmt: skip


@define
class OperationDisplay:
    provider: Optional[str] = field(default=None, metadata={"description": "The localized friendly form of the resource provider name, e.g. Microsoft Monitoring Insights or Microsoft Compute ."})  # fmt: skip
    resource: Optional[str] = field(default=None, metadata={"description": "The localized friendly name of the resource type related to this operation. E.g. Virtual Machines or Job Schedule Collections ."})  # fmt: skip
    operation: Optional[str] = field(default=None, metadata={"description": "The concise, localized friendly name for the operation; suitable for dropdowns. E.g. Create or Update Virtual Machine , Restart Virtual Machine ."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "The short, localized friendly description of the operation; suitable for tool tips and detailed views."})  # fmt: skip


@define
class OperationListResult:
    value: Optional[List[Operation]] = field(default=None, metadata={"description": "List of operations supported by the resource provider"})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "URL to get the next set of operation list results (if there are any)."})  # fmt: skip


@define
class OperationResult:
    id: Optional[str] = field(default=None, metadata={"description": "Fully qualified resource ID for the resource. Ex - /subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/{resourceProviderNamespace}/{resourceType}/{resourceName}"})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource"})
    status: Optional[OperationResultStatus] = field(default=None, metadata={"description": "The operation status"})
    start_time: Optional[datetime] = field(default=None, metadata={"description": "Start time"})
    end_time: Optional[datetime] = field(default=None, metadata={"description": "End time"})
    percent_complete: Optional[float] = field(default=None, metadata={"description": "Percent completion"})
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class PagedImages:
    value: Optional[List[Image]] = field(default=None, metadata={"description": "The array page of virtual machine images."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of image results."})  # fmt: skip


@define
class PagedLabPlans:
    value: Optional[List[LabPlan]] = field(default=None, metadata={"description": "The array page of lab plans."})
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of lab plan results."})  # fmt: skip


@define
class PagedLabServicesSkus:
    value: Optional[List[LabServicesSku]] = field(default=None, metadata={"description": "The array page of sku results."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of sku results."})  # fmt: skip


@define
class PagedLabs:
    value: Optional[List[Lab]] = field(default=None, metadata={"description": "The array page of lab results."})
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of image results."})  # fmt: skip


@define
class PagedSchedules:
    value: Optional[List[Schedule]] = field(default=None, metadata={"description": "The array page of schedule results."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of schedule results."})  # fmt: skip


@define
class PagedUsers:
    value: Optional[List[User]] = field(default=None, metadata={"description": "The array page of user results."})
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of image results."})  # fmt: skip


@define
class PagedVirtualMachines:
    value: Optional[List[VirtualMachine]] = field(default=None, metadata={"description": "The array page of virtual machine results."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "The link to get the next page of virtual machine results."})  # fmt: skip


@define
class RecurrencePattern:
    frequency: Optional[RecurrenceFrequency] = field(default=None, metadata={"description": "Schedule recurrence frequencies."})  # fmt: skip
    week_days: Optional[List[WeekDay]] = field(default=None, metadata={"description": "The week days the schedule runs. Used for when the Frequency is set to Weekly."})  # fmt: skip
    interval: Optional[int] = field(default=None, metadata={"description": "The interval to invoke the schedule on. For example, interval = 2 and RecurrenceFrequency.Daily will run every 2 days. When no interval is supplied, an interval of 1 is used."})  # fmt: skip
    expiration_date: Optional[str] = field(default=None, metadata={"description": "When the recurrence will expire. This date is inclusive."})  # fmt: skip


@define
class ResetPasswordBody:
    username: Optional[str] = field(default=None, metadata={"description": "The user whose password is being reset"})
    password: Optional[str] = field(default=None, metadata={"description": "The password"})


@define
class RosterProfile:
    active_directory_group_id: Optional[str] = field(default=None, metadata={"description": "The AAD group ID which this lab roster is populated from. Having this set enables AAD sync mode."})  # fmt: skip
    lti_context_id: Optional[str] = field(default=None, metadata={"description": "The unique context identifier for the lab in the lms."})  # fmt: skip
    lms_instance: Optional[str] = field(default=None, metadata={"description": "The base URI identifying the lms instance."})  # fmt: skip
    lti_client_id: Optional[str] = field(default=None, metadata={"description": "The unique id of the azure lab services tool in the lms."})  # fmt: skip
    lti_roster_endpoint: Optional[str] = field(default=None, metadata={"description": "The uri of the names and roles service endpoint on the lms for the class attached to this lab."})  # fmt: skip


@define
class SaveImageBody:
    name: Optional[str] = field(default=None, metadata={"description": "The name for the image we create."})
    lab_virtual_machine_id: Optional[str] = field(default=None, metadata={"description": "A URL."})


@define
class Schedule(ProxyResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[ScheduleProperties] = field(default=None, metadata={"description": "Schedule resource properties"})  # fmt: skip


@define
class ScheduleUpdateProperties:
    start_at: Optional[datetime] = field(default=None, metadata={"description": "When lab user virtual machines will be started. Timestamp offsets will be ignored and timeZoneId is used instead."})  # fmt: skip
    stop_at: Optional[datetime] = field(default=None, metadata={"description": "When lab user virtual machines will be stopped. Timestamp offsets will be ignored and timeZoneId is used instead."})  # fmt: skip
    recurrence_pattern: Optional[RecurrencePattern] = field(default=None, metadata={"description": "Recurrence pattern of a lab schedule."})  # fmt: skip
    time_zone_id: Optional[str] = field(default=None, metadata={"description": "The IANA timezone id for the schedule."})  # fmt: skip
    notes: Optional[str] = field(default=None, metadata={"description": "Notes for this schedule."})


@define
class ScheduleProperties(ScheduleUpdateProperties):
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip


@define
class ScheduleUpdate:
    properties: Optional[ScheduleUpdateProperties] = field(default=None, metadata={"description": "Schedule resource properties used for updates."})  # fmt: skip


@define
class SecurityProfile:
    registration_code: Optional[str] = field(default=None, metadata={"description": "The registration code for the lab."})  # fmt: skip
    open_access: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})


@define
class Sku:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the SKU. Ex - P3. It is typically a letter+number code"})  # fmt: skip
    tier: Optional[SkuTier] = field(default=None, metadata={"description": "This field is required to be implemented by the Resource Provider if the service has more than one tier, but is not required on a PUT."})  # fmt: skip
    size: Optional[str] = field(default=None, metadata={"description": "The SKU size. When the name field is the combination of tier and some other value, this would be the standalone code."})  # fmt: skip
    family: Optional[str] = field(default=None, metadata={"description": "If the service has different generations of hardware, for the same SKU, then that can be captured here."})  # fmt: skip
    capacity: Optional[int] = field(default=None, metadata={"description": "If the SKU supports scale out/in then the capacity integer should be included. If scale out/in is not possible for the resource this may be omitted."})  # fmt: skip


@define
class SupportInfo:
    url: Optional[str] = field(default=None, metadata={"description": "A URL."})
    email: Optional[str] = field(default=None, metadata={"description": "An email address."})
    phone: Optional[str] = field(default=None, metadata={"description": "A phone number."})
    instructions: Optional[str] = field(default=None, metadata={"description": "Support instructions."})


@define
class Usage:
    current_value: Optional[int] = field(default=None, metadata={"description": "The current usage."})
    limit: Optional[int] = field(default=None, metadata={"description": "The limit integer."})
    unit: Optional[UsageUnit] = field(default=None, metadata={"description": "The unit details."})
    name: Optional[UsageName] = field(default=None, metadata={"description": "The Usage Names."})
    id: Optional[str] = field(default=None, metadata={"description": "The fully qualified arm resource id."})


@define
class UsageName:
    localized_value: Optional[str] = field(default=None, metadata={"description": "The localized name of the resource."})  # fmt: skip
    value: Optional[str] = field(default=None, metadata={"description": "The name of the resource."})


@define
class User(ProxyResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[UserProperties] = field(default=None, metadata={"description": "User resource properties"})


@define
class UserUpdateProperties:
    additional_usage_quota: Optional[str] = field(default=None, metadata={"description": "The amount of usage quota time the user gets in addition to the lab usage quota."})  # fmt: skip


@define
class UserProperties(UserUpdateProperties):
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the user, for example user s full name."})  # fmt: skip
    email: Optional[str] = field(default=None, metadata={"description": "An email address."})
    registration_state: Optional[RegistrationState] = field(default=None, metadata={"description": "The user lab registration state."})  # fmt: skip
    invitation_state: Optional[InvitationState] = field(default=None, metadata={"description": "The lab user invitation state."})  # fmt: skip
    invitation_sent: Optional[datetime] = field(default=None, metadata={"description": "Date and time when the invitation message was sent to the user."})  # fmt: skip
    total_usage: Optional[str] = field(default=None, metadata={"description": "How long the user has used their virtual machines in this lab."})  # fmt: skip


@define
class UserUpdate:
    properties: Optional[UserUpdateProperties] = field(default=None, metadata={"description": "User resource properties used for updates."})  # fmt: skip


@define
class VirtualMachine(ProxyResource):
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip
    properties: Optional[VirtualMachineProperties] = field(default=None, metadata={"description": "Virtual machine resource properties"})  # fmt: skip


@define
class VirtualMachineAdditionalCapabilities:
    install_gpu_drivers: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})  # fmt: skip


@define
class VirtualMachineConnectionProfile:
    private_ip_address: Optional[str] = field(default=None, metadata={"description": "The private IP address of the virtual machine."})  # fmt: skip
    ssh_authority: Optional[str] = field(default=None, metadata={"description": "Port and host name separated by semicolon for connecting via SSH protocol to the virtual machine."})  # fmt: skip
    ssh_in_browser_url: Optional[str] = field(default=None, metadata={"description": "A URL."})
    rdp_authority: Optional[str] = field(default=None, metadata={"description": "Port and host name separated by semicolon for connecting via RDP protocol to the virtual machine."})  # fmt: skip
    rdp_in_browser_url: Optional[str] = field(default=None, metadata={"description": "A URL."})
    admin_username: Optional[str] = field(default=None, metadata={"description": "The username used to log on to the virtual machine as admin."})  # fmt: skip
    non_admin_username: Optional[str] = field(default=None, metadata={"description": "The username used to log on to the virtual machine as non-admin, if one exists."})  # fmt: skip


@define
class VirtualMachineProfile:
    create_option: Optional[VirtualMachineProfileCreateOption] = field(default=None, metadata={"description": "Indicates what lab virtual machines are created from."})  # fmt: skip
    image_reference: Optional[ImageReference] = field(default=None, metadata={"description": "Image reference information. Used in the virtual machine profile."})  # fmt: skip
    os_type: Optional[OsType] = field(default=None, metadata={"description": "The operating system type."})
    sku: Optional[Sku] = field(default=None, metadata={"description": "The resource model definition representing SKU"})
    additional_capabilities: Optional[VirtualMachineAdditionalCapabilities] = field(default=None, metadata={"description": "The additional capabilities for a lab VM."})  # fmt: skip
    usage_quota: Optional[str] = field(default=None, metadata={"description": "The initial quota alloted to each lab user. Must be a time span between 0 and 9999 hours."})  # fmt: skip
    use_shared_password: Optional[EnableState] = field(default=None, metadata={"description": "Property enabled state."})  # fmt: skip
    admin_user: Optional[Credentials] = field(default=None, metadata={"description": "Credentials for a user on a lab VM."})  # fmt: skip
    non_admin_user: Optional[Credentials] = field(default=None, metadata={"description": "Credentials for a user on a lab VM."})  # fmt: skip


@define
class VirtualMachineProperties:
    provisioning_state: Optional[ProvisioningState] = field(default=None, metadata={"description": "Resource provisioning state."})  # fmt: skip
    state: Optional[VirtualMachineState] = field(default=None, metadata={"description": "The state of a virtual machine."})  # fmt: skip
    connection_profile: Optional[VirtualMachineConnectionProfile] = field(default=None, metadata={"description": "The connection information for the virtual machine"})  # fmt: skip
    claimed_by_user_id: Optional[str] = field(default=None, metadata={"description": "The lab user ID (not the PUID!) of who claimed the virtual machine."})  # fmt: skip
    vm_type: Optional[VirtualMachineType] = field(default=None, metadata={"description": "The type of the lab virtual machine."})  # fmt: skip


@define
class SystemData:
    created_by: Optional[str] = field(default=None, metadata={"description": "The identity that created the resource."})
    created_by_type: Optional[CreatedByType] = field(default=None, metadata={"description": "The type of identity that created the resource."})  # fmt: skip
    created_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource creation (UTC)."})  # fmt: skip
    last_modified_by: Optional[str] = field(default=None, metadata={"description": "The identity that last modified the resource."})  # fmt: skip
    last_modified_by_type: Optional[LastModifiedByType] = field(default=None, metadata={"description": "The type of identity that last modified the resource."})  # fmt: skip
    last_modified_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource last modification (UTC)"})  # fmt: skip
