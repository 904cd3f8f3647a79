from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from attr import define, field

from fix_arm_sdk.enums import ExpandableEnum
from fix_arm_sdk.json import register_subtypes


class AccessPolicyPropertiesRole(ExpandableEnum):
    """Defines the access level granted by this policy."""

    READER = "Reader"


class AccountEncryptionType(ExpandableEnum):
    """The type of key used to encrypt the Account Key."""

    SYSTEM_KEY = "SystemKey"
    CUSTOMER_KEY = "CustomerKey"


class CheckNameAvailabilityResponseReason(ExpandableEnum):
    """The reason why the given name is not available."""

    INVALID = "Invalid"
    ALREADY_EXISTS = "AlreadyExists"


class EccTokenKeyAlg(ExpandableEnum):
    """Elliptical curve algorithm to be used: ES256, ES384 or ES512."""

    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"


class EncoderSystemPresetName(ExpandableEnum):
    """Name of the built-in encoding preset."""

    SINGLE_LAYER_540P_H264_AAC = "SingleLayer_540p_H264_AAC"
    SINGLE_LAYER_720P_H264_AAC = "SingleLayer_720p_H264_AAC"
    SINGLE_LAYER_1080P_H264_AAC = "SingleLayer_1080p_H264_AAC"
    SINGLE_LAYER_2160P_H264_AAC = "SingleLayer_2160p_H264_AAC"


class EndpointType(ExpandableEnum):
    """The type of the endpoint."""

    CLIENT_API = "ClientApi"


class GroupLevelAccessControlPublicNetworkAccess(ExpandableEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class LivePipelinePropertiesState(ExpandableEnum):
    """Current state of the pipeline (read-only)."""

    INACTIVE = "Inactive"
    ACTIVATING = "Activating"
    ACTIVE = "Active"
    DEACTIVATING = "Deactivating"


class LivePipelinePropertiesUpdateState(ExpandableEnum):
    """Current state of the pipeline (read-only)."""

    INACTIVE = "Inactive"
    ACTIVATING = "Activating"
    ACTIVE = "Active"
    DEACTIVATING = "Deactivating"


class MetricSpecificationUnit(ExpandableEnum):
    """The metric unit"""

    BYTES = "Bytes"
    COUNT = "Count"
    MILLISECONDS = "Milliseconds"


class MetricSpecificationAggregationType(ExpandableEnum):
    """The metric aggregation type"""

    AVERAGE = "Average"
    COUNT = "Count"
    TOTAL = "Total"


class MetricSpecificationLockAggregationType(ExpandableEnum):
    """The metric lock aggregation type"""

    AVERAGE = "Average"
    COUNT = "Count"
    TOTAL = "Total"


class OperationActionType(ExpandableEnum):
    """Indicates the action type."""

    INTERNAL = "Internal"


class ParameterDeclarationType(ExpandableEnum):
    """Type of the parameter."""

    STRING = "String"
    SECRET_STRING = "SecretString"
    INT = "Int"
    DOUBLE = "Double"
    BOOL = "Bool"


class PipelineJobPropertiesState(ExpandableEnum):
    """Current state of the pipeline (read-only)."""

    PROCESSING = "Processing"
    CANCELED = "Canceled"
    COMPLETED = "Completed"
    FAILED = "Failed"


class PipelineJobPropertiesUpdateState(ExpandableEnum):
    """Current state of the pipeline (read-only)."""

    PROCESSING = "Processing"
    CANCELED = "Canceled"
    COMPLETED = "Completed"
    FAILED = "Failed"


class PipelineTopologyKind(ExpandableEnum):
    """Topology kind."""

    LIVE = "Live"
    BATCH = "Batch"


class PipelineTopologyUpdateKind(ExpandableEnum):
    """Topology kind."""

    LIVE = "Live"
    BATCH = "Batch"


class PrivateEndpointConnectionProvisioningState(ExpandableEnum):
    """The current provisioning state."""

    SUCCEEDED = "Succeeded"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"


class PrivateEndpointServiceConnectionStatus(ExpandableEnum):
    """The private endpoint connection status."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class RsaTokenKeyAlg(ExpandableEnum):
    """RSA algorithm to be used: RS256, RS384 or RS512."""

    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"


class RtspSourceTransport(ExpandableEnum):
    HTTP = "Http"
    TCP = "Tcp"


class SkuName(ExpandableEnum):
    """The SKU name."""

    LIVE_S1 = "Live_S1"
    BATCH_S1 = "Batch_S1"


class SkuTier(ExpandableEnum):
    """The SKU tier."""

    STANDARD = "Standard"


class VideoAnalyzerPropertiesPublicNetworkAccess(ExpandableEnum):
    """Whether or not public network access is allowed for resources under the Video Analyzer account."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class VideoAnalyzerPropertiesProvisioningState(ExpandableEnum):
    """Provisioning state of the Video Analyzer account."""

    FAILED = "Failed"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"


class VideoAnalyzerPropertiesUpdatePublicNetworkAccess(ExpandableEnum):
    """Whether or not public network access is allowed for resources under the Video Analyzer account."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class VideoAnalyzerPropertiesUpdateProvisioningState(ExpandableEnum):
    """Provisioning state of the Video Analyzer account."""

    FAILED = "Failed"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"


class VideoPropertiesType(ExpandableEnum):
    """Video content type. Different content types are suitable for different applications and scenarios."""

    ARCHIVE = "Archive"
    FILE = "File"


class VideoScaleMode(ExpandableEnum):
    PAD = "Pad"
    PRESERVE_ASPECT_RATIO = "PreserveAspectRatio"
    STRETCH = "Stretch"


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
class Resource:
    id: Optional[str] = field(default=None, metadata={"description": "Fully qualified resource ID for the resource. Ex - /subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/{resourceProviderNamespace}/{resourceType}/{resourceName}"})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource"})
    type: Optional[str] = field(default=None, metadata={"description": "The type of the resource. E.g. Microsoft.Compute/virtualMachines or Microsoft.Storage/storageAccounts"})  # fmt: skip
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Metadata pertaining to creation and last modification of the resource."})  # fmt: skip


@define
class ProxyResource(Resource):
    pass


@define
class AccessPolicyEntity(ProxyResource):
    properties: Optional[AccessPolicyProperties] = field(default=None, metadata={"description": "Application level properties for the access policy resource."})  # fmt: skip


@define
class AccessPolicyEntityCollection:
    value: Optional[List[AccessPolicyEntity]] = field(default=None, metadata={"description": "A collection of AccessPolicyEntity items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class AccessPolicyProperties:
    role: Optional[AccessPolicyPropertiesRole] = field(default=None, metadata={"description": "Defines the access level granted by this policy."})  # fmt: skip
    authentication: Optional[AuthenticationBase] = field(default=None, metadata={"description": "Base class for access policies authentication methods."})  # fmt: skip


@define
class AccountEncryption:
    type: Optional[AccountEncryptionType] = field(default=None, metadata={"description": "The type of key used to encrypt the Account Key."})  # fmt: skip
    key_vault_properties: Optional[KeyVaultProperties] = field(default=None, metadata={"description": "The details for accessing the encryption keys in Key Vault."})  # fmt: skip
    identity: Optional[ResourceIdentity] = field(default=None, metadata={"description": "The user assigned managed identity to use when accessing a resource."})  # fmt: skip
    status: Optional[str] = field(default=None, metadata={"description": "The current status of the Key Vault mapping."})  # fmt: skip


@define
class AudioEncoderBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip
    bitrate_kbps: Optional[str] = field(default=None, metadata={"description": "Bitrate, in kilobits per second or Kbps, at which audio should be encoded (2-channel stereo audio at a sampling rate of 48 kHz). Allowed values are 96, 112, 128, 160, 192, 224, and 256. If omitted, the bitrate of the input audio is used."})  # fmt: skip


@define
class AudioEncoderAac(AudioEncoderBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.AudioEncoderAac", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip


@define
class AuthenticationBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class CertificateSource:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class CheckNameAvailabilityRequest:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource for which availability needs to be checked."})  # fmt: skip
    type: Optional[str] = field(default=None, metadata={"description": "The resource type."})


@define
class CheckNameAvailabilityResponse:
    name_available: Optional[bool] = field(default=None, metadata={"description": "Indicates if the resource name is available."})  # fmt: skip
    reason: Optional[CheckNameAvailabilityResponseReason] = field(default=None, metadata={"description": "The reason why the given name is not available."})  # fmt: skip
    message: Optional[str] = field(default=None, metadata={"description": "Detailed reason why the given name is available."})  # fmt: skip


@define
class CredentialsBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class TokenKey:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip
    kid: Optional[str] = field(default=None, metadata={"description": "JWT token key id. Validation keys are looked up based on the key id present on the JWT token header."})  # fmt: skip


@define
class EccTokenKey(TokenKey):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.EccTokenKey", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    alg: Optional[EccTokenKeyAlg] = field(default=None, metadata={"description": "Elliptical curve algorithm to be used: ES256, ES384 or ES512."})  # fmt: skip
    x: Optional[str] = field(default=None, metadata={"description": "X coordinate."})
    y: Optional[str] = field(default=None, metadata={"description": "Y coordinate."})


@define
class EdgeModuleEntity(ProxyResource):
    properties: Optional[EdgeModuleProperties] = field(default=None, metadata={"description": "Application level properties for the edge module resource."})  # fmt: skip


@define
class EdgeModuleEntityCollection:
    value: Optional[List[EdgeModuleEntity]] = field(default=None, metadata={"description": "A collection of EdgeModuleEntity items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class EdgeModuleProperties:
    edge_module_id: Optional[str] = field(default=None, metadata={"description": "Internal ID generated for the instance of the Video Analyzer edge module."})  # fmt: skip


@define
class EdgeModuleProvisioningToken:
    expiration_date: Optional[datetime] = field(default=None, metadata={"description": "The expiration date of the registration token. The Azure Video Analyzer IoT edge module must be initialized and connected to the Internet prior to the token expiration date."})  # fmt: skip
    token: Optional[str] = field(default=None, metadata={"description": "The token blob to be provided to the Azure Video Analyzer IoT edge module through the Azure IoT Edge module twin properties."})  # fmt: skip


@define
class EncoderPresetBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class EncoderCustomPreset(EncoderPresetBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.EncoderCustomPreset", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    audio_encoder: Optional[AudioEncoderBase] = field(default=None, metadata={"description": "Base type for all audio encoder presets, which define the recipe or instructions on how audio should be processed."})  # fmt: skip
    video_encoder: Optional[VideoEncoderBase] = field(default=None, metadata={"description": "Base type for all video encoding presets, which define the recipe or instructions on how the input video should be processed."})  # fmt: skip


@define
class NodeBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "Node name. Must be unique within the topology."})  # fmt: skip


@define
class ProcessorNodeBase(NodeBase):
    inputs: Optional[List[NodeInput]] = field(default=None, metadata={"description": "An array of upstream node references within the topology to be used as inputs for this node."})  # fmt: skip


@define
class EncoderProcessor(ProcessorNodeBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.EncoderProcessor", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    preset: Optional[EncoderPresetBase] = field(default=None, metadata={"description": "Base type for all encoder presets, which define the recipe or instructions on how the input content should be processed."})  # fmt: skip


@define
class EncoderSystemPreset(EncoderPresetBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.EncoderSystemPreset", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    name: Optional[EncoderSystemPresetName] = field(default=None, metadata={"description": "Name of the built-in encoding preset."})  # fmt: skip


@define
class Endpoint:
    endpoint_url: Optional[str] = field(default=None, metadata={"description": "The URL of the endpoint."})
    type: Optional[EndpointType] = field(default=None, metadata={"description": "The type of the endpoint."})


@define
class EndpointBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip
    credentials: Optional[CredentialsBase] = field(default=None, metadata={"description": "Base class for credential objects."})  # fmt: skip
    url: Optional[str] = field(default=None, metadata={"description": "The endpoint URL for Video Analyzer to connect to."})  # fmt: skip
    tunnel: Optional[TunnelBase] = field(default=None, metadata={"description": "Base class for tunnel objects."})


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
class GroupLevelAccessControl:
    public_network_access: Optional[GroupLevelAccessControlPublicNetworkAccess] = field(default=None, metadata={"description": "Whether or not public network access is allowed for specified resources under the Video Analyzer account."})  # fmt: skip


@define
class IotHub:
    id: Optional[str] = field(default=None, metadata={"description": "The IoT Hub resource identifier."})
    identity: Optional[ResourceIdentity] = field(default=None, metadata={"description": "The user assigned managed identity to use when accessing a resource."})  # fmt: skip
    status: Optional[str] = field(default=None, metadata={"description": "The current status of the Iot Hub mapping."})


@define
class JwtAuthentication(AuthenticationBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.JwtAuthentication", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    issuers: Optional[List[str]] = field(default=None, metadata={"description": "List of expected token issuers. Token issuer is valid if it matches at least one of the given values."})  # fmt: skip
    audiences: Optional[List[str]] = field(default=None, metadata={"description": "List of expected token audiences. Token audience is valid if it matches at least one of the given values."})  # fmt: skip
    claims: Optional[List[TokenClaim]] = field(default=None, metadata={"description": "List of additional token claims to be validated. Token must contains all claims and respective values for it to be valid."})  # fmt: skip
    keys: Optional[List[TokenKey]] = field(default=None, metadata={"description": "List of keys which can be used to validate access tokens. Having multiple keys allow for seamless key rotation of the token signing key. Token signature must match exactly one key."})  # fmt: skip


@define
class KeyVaultProperties:
    key_identifier: Optional[str] = field(default=None, metadata={"description": "The URL of the Key Vault key used to encrypt the account. The key may either be versioned (for example https://vault/keys/mykey/version1) or reference a key without a version (for example https://vault/keys/mykey)."})  # fmt: skip
    current_key_identifier: Optional[str] = field(default=None, metadata={"description": "The current key used to encrypt Video Analyzer account, including the key version."})  # fmt: skip


@define
class ListProvisioningTokenInput:
    expiration_date: Optional[datetime] = field(default=None, metadata={"description": "The desired expiration date of the registration token. The Azure Video Analyzer IoT edge module must be initialized and connected to the Internet prior to the token expiration date."})  # fmt: skip


@define
class LivePipeline(ProxyResource):
    properties: Optional[LivePipelineProperties] = field(default=None, metadata={"description": "Live pipeline properties."})  # fmt: skip


@define
class LivePipelineCollection:
    value: Optional[List[LivePipeline]] = field(default=None, metadata={"description": "A collection of LivePipeline items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class LivePipelineOperationStatus:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the live pipeline operation."})
    status: Optional[str] = field(default=None, metadata={"description": "The status of the live pipeline operation."})
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class LivePipelineProperties:
    topology_name: Optional[str] = field(default=None, metadata={"description": "The reference to an existing pipeline topology defined for real-time content processing. When activated, this live pipeline will process content according to the pipeline topology definition."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "An optional description for the pipeline."})  # fmt: skip
    bitrate_kbps: Optional[int] = field(default=None, metadata={"description": "Maximum bitrate capacity in Kbps reserved for the live pipeline. The allowed range is from 500 to 3000 Kbps in increments of 100 Kbps. If the RTSP camera exceeds this capacity, then the service will disconnect temporarily from the camera. It will retry to re-establish connection (with exponential backoff), checking to see if the camera bitrate is now below the reserved capacity. Doing so will ensure that one noisy neighbor does not affect other live pipelines in your account."})  # fmt: skip
    state: Optional[LivePipelinePropertiesState] = field(default=None, metadata={"description": "Current state of the pipeline (read-only)."})  # fmt: skip
    parameters: Optional[List[ParameterDefinition]] = field(default=None, metadata={"description": "List of the instance level parameter values for the user-defined topology parameters. A pipeline can only define or override parameters values for parameters which have been declared in the referenced topology. Topology parameters without a default value must be defined. Topology parameters with a default value can be optionally be overridden."})  # fmt: skip


@define
class LivePipelinePropertiesUpdate:
    topology_name: Optional[str] = field(default=None, metadata={"description": "The reference to an existing pipeline topology defined for real-time content processing. When activated, this live pipeline will process content according to the pipeline topology definition."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "An optional description for the pipeline."})  # fmt: skip
    bitrate_kbps: Optional[int] = field(default=None, metadata={"description": "Maximum bitrate capacity in Kbps reserved for the live pipeline. The allowed range is from 500 to 3000 Kbps in increments of 100 Kbps. If the RTSP camera exceeds this capacity, then the service will disconnect temporarily from the camera. It will retry to re-establish connection (with exponential backoff), checking to see if the camera bitrate is now below the reserved capacity. Doing so will ensure that one noisy neighbor does not affect other live pipelines in your account."})  # fmt: skip
    state: Optional[LivePipelinePropertiesUpdateState] = field(default=None, metadata={"description": "Current state of the pipeline (read-only)."})  # fmt: skip
    parameters: Optional[List[ParameterDefinition]] = field(default=None, metadata={"description": "List of the instance level parameter values for the user-defined topology parameters. A pipeline can only define or override parameters values for parameters which have been declared in the referenced topology. Topology parameters without a default value must be defined. Topology parameters with a default value can be optionally be overridden."})  # fmt: skip


@define
class LivePipelineUpdate(ProxyResource):
    properties: Optional[LivePipelinePropertiesUpdate] = field(default=None, metadata={"description": "Live pipeline properties."})  # fmt: skip


@define
class LogSpecification:
    name: Optional[str] = field(default=None, metadata={"description": "The diagnostic log category name."})
    display_name: Optional[str] = field(default=None, metadata={"description": "The diagnostic log category display name."})  # fmt: skip
    blob_duration: Optional[str] = field(default=None, metadata={"description": "The time range for requests in each blob."})  # fmt: skip


@define
class MetricDimension:
    name: Optional[str] = field(default=None, metadata={"description": "The metric dimension name."})
    display_name: Optional[str] = field(default=None, metadata={"description": "The display name for the dimension."})
    to_be_exported_for_shoebox: Optional[bool] = field(default=None, metadata={"description": "Whether to export metric to shoebox."})  # fmt: skip


@define
class MetricSpecification:
    name: Optional[str] = field(default=None, metadata={"description": "The metric name."})
    display_name: Optional[str] = field(default=None, metadata={"description": "The metric display name."})
    display_description: Optional[str] = field(default=None, metadata={"description": "The metric display description."})  # fmt: skip
    unit: Optional[MetricSpecificationUnit] = field(default=None, metadata={"description": "The metric unit"})
    aggregation_type: Optional[MetricSpecificationAggregationType] = field(default=None, metadata={"description": "The metric aggregation type"})  # fmt: skip
    lock_aggregation_type: Optional[MetricSpecificationLockAggregationType] = field(default=None, metadata={"description": "The metric lock aggregation type"})  # fmt: skip
    supported_aggregation_types: Optional[List[str]] = field(default=None, metadata={"description": "Supported aggregation types."})  # fmt: skip
    dimensions: Optional[List[MetricDimension]] = field(default=None, metadata={"description": "The metric dimensions."})  # fmt: skip
    enable_regional_mdm_account: Optional[bool] = field(default=None, metadata={"description": "Indicates whether regional MDM account is enabled."})  # fmt: skip
    source_mdm_account: Optional[str] = field(default=None, metadata={"description": "The source MDM account."})
    source_mdm_namespace: Optional[str] = field(default=None, metadata={"description": "The source MDM namespace."})
    supported_time_grain_types: Optional[List[str]] = field(default=None, metadata={"description": "The supported time grain types."})  # fmt: skip


@define
class NetworkAccessControl:
    integration: Optional[GroupLevelAccessControl] = field(default=None, metadata={"description": "Group level network access control."})  # fmt: skip
    ingestion: Optional[GroupLevelAccessControl] = field(default=None, metadata={"description": "Group level network access control."})  # fmt: skip
    consumption: Optional[GroupLevelAccessControl] = field(default=None, metadata={"description": "Group level network access control."})  # fmt: skip


@define
class NodeInput:
    node_name: Optional[str] = field(default=None, metadata={"description": "The name of the upstream node in the pipeline which output is used as input of the current node."})  # fmt: skip


@define
class Operation:
    name: Optional[str] = field(default=None, metadata={"description": "The operation name."})
    display: Optional[OperationDisplay] = field(default=None, metadata={"description": "Operation details."})
    origin: Optional[str] = field(default=None, metadata={"description": "Origin of the operation."})
    properties: Optional[Properties] = field(default=None, metadata={"description": "Metric properties."})
    is_data_action: Optional[bool] = field(default=None, metadata={"description": "Whether the operation applies to data-plane."})  # fmt: skip
    action_type: Optional[OperationActionType] = field(default=None, metadata={"description": "Indicates the action type."})  # fmt: skip


@define
class OperationCollection:
    value: Optional[List[Operation]] = field(default=None, metadata={"description": "A collection of Operation items."})


@define
class OperationDisplay:
    provider: Optional[str] = field(default=None, metadata={"description": "The service provider."})
    resource: Optional[str] = field(default=None, metadata={"description": "Resource on which the operation is performed."})  # fmt: skip
    operation: Optional[str] = field(default=None, metadata={"description": "The operation type."})
    description: Optional[str] = field(default=None, metadata={"description": "The operation description."})


@define
class ParameterDeclaration:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the parameter."})
    type: Optional[ParameterDeclarationType] = field(default=None, metadata={"description": "Type of the parameter."})
    description: Optional[str] = field(default=None, metadata={"description": "Description of the parameter."})
    default: Optional[str] = field(default=None, metadata={"description": "The default value for the parameter to be used if the pipeline does not specify a value."})  # fmt: skip


@define
class ParameterDefinition:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the parameter declared in the pipeline topology."})  # fmt: skip
    value: Optional[str] = field(default=None, metadata={"description": "Parameter value to be applied on this specific pipeline."})  # fmt: skip


@define
class PemCertificateList(CertificateSource):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.PemCertificateList", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    certificates: Optional[List[str]] = field(default=None, metadata={"description": "PEM formatted public certificates. One certificate per entry."})  # fmt: skip


@define
class PipelineJob(ProxyResource):
    properties: Optional[PipelineJobProperties] = field(default=None, metadata={"description": "Pipeline job properties."})  # fmt: skip


@define
class PipelineJobCollection:
    value: Optional[List[PipelineJob]] = field(default=None, metadata={"description": "A collection of PipelineJob items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class PipelineJobError:
    code: Optional[str] = field(default=None, metadata={"description": "The error code."})
    message: Optional[str] = field(default=None, metadata={"description": "The error message."})


@define
class PipelineJobOperationStatus:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the pipeline job operation."})
    status: Optional[str] = field(default=None, metadata={"description": "The status of the pipeline job operation."})
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class PipelineJobProperties:
    topology_name: Optional[str] = field(default=None, metadata={"description": "Reference to an existing pipeline topology. When activated, this pipeline job will process content according to the pipeline topology definition."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "An optional description for the pipeline."})  # fmt: skip
    state: Optional[PipelineJobPropertiesState] = field(default=None, metadata={"description": "Current state of the pipeline (read-only)."})  # fmt: skip
    expiration: Optional[datetime] = field(default=None, metadata={"description": "The date-time by when this pipeline job will be automatically deleted from your account."})  # fmt: skip
    error: Optional[PipelineJobError] = field(default=None, metadata={"description": "Details about the error for a failed pipeline job."})  # fmt: skip
    parameters: Optional[List[ParameterDefinition]] = field(default=None, metadata={"description": "List of the instance level parameter values for the user-defined topology parameters. A pipeline can only define or override parameters values for parameters which have been declared in the referenced topology. Topology parameters without a default value must be defined. Topology parameters with a default value can be optionally be overridden."})  # fmt: skip


@define
class PipelineJobPropertiesUpdate:
    topology_name: Optional[str] = field(default=None, metadata={"description": "Reference to an existing pipeline topology. When activated, this pipeline job will process content according to the pipeline topology definition."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "An optional description for the pipeline."})  # fmt: skip
    state: Optional[PipelineJobPropertiesUpdateState] = field(default=None, metadata={"description": "Current state of the pipeline (read-only)."})  # fmt: skip
    expiration: Optional[datetime] = field(default=None, metadata={"description": "The date-time by when this pipeline job will be automatically deleted from your account."})  # fmt: skip
    error: Optional[PipelineJobError] = field(default=None, metadata={"description": "Details about the error for a failed pipeline job."})  # fmt: skip
    parameters: Optional[List[ParameterDefinition]] = field(default=None, metadata={"description": "List of the instance level parameter values for the user-defined topology parameters. A pipeline can only define or override parameters values for parameters which have been declared in the referenced topology. Topology parameters without a default value must be defined. Topology parameters with a default value can be optionally be overridden."})  # fmt: skip


@define
class PipelineJobUpdate(ProxyResource):
    properties: Optional[PipelineJobPropertiesUpdate] = field(default=None, metadata={"description": "Pipeline job properties."})  # fmt: skip


@define
class PipelineTopology(ProxyResource):
    properties: Optional[PipelineTopologyProperties] = field(default=None, metadata={"description": "Describes the properties of a pipeline topology."})  # fmt: skip
    kind: Optional[PipelineTopologyKind] = field(default=None, metadata={"description": "Topology kind."})
    sku: Optional[Sku] = field(default=None, metadata={"description": "The SKU details."})


@define
class PipelineTopologyCollection:
    value: Optional[List[PipelineTopology]] = field(default=None, metadata={"description": "A collection of PipelineTopology items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class PipelineTopologyProperties:
    description: Optional[str] = field(default=None, metadata={"description": "An optional description of the pipeline topology. It is recommended that the expected use of the topology to be described here."})  # fmt: skip
    parameters: Optional[List[ParameterDeclaration]] = field(default=None, metadata={"description": "List of the topology parameter declarations. Parameters declared here can be referenced throughout the topology nodes through the use of ${PARAMETER_NAME} string pattern. Parameters can have optional default values and can later be defined in individual instances of the pipeline."})  # fmt: skip
    sources: Optional[List[SourceNodeBase]] = field(default=None, metadata={"description": "List of the topology source nodes. Source nodes enable external data to be ingested by the pipeline."})  # fmt: skip
    processors: Optional[List[ProcessorNodeBase]] = field(default=None, metadata={"description": "List of the topology processor nodes. Processor nodes enable pipeline data to be analyzed, processed or transformed."})  # fmt: skip
    sinks: Optional[List[SinkNodeBase]] = field(default=None, metadata={"description": "List of the topology sink nodes. Sink nodes allow pipeline data to be stored or exported."})  # fmt: skip


@define
class PipelineTopologyPropertiesUpdate:
    description: Optional[str] = field(default=None, metadata={"description": "An optional description of the pipeline topology. It is recommended that the expected use of the topology to be described here."})  # fmt: skip
    parameters: Optional[List[ParameterDeclaration]] = field(default=None, metadata={"description": "List of the topology parameter declarations. Parameters declared here can be referenced throughout the topology nodes through the use of ${PARAMETER_NAME} string pattern. Parameters can have optional default values and can later be defined in individual instances of the pipeline."})  # fmt: skip
    sources: Optional[List[SourceNodeBase]] = field(default=None, metadata={"description": "List of the topology source nodes. Source nodes enable external data to be ingested by the pipeline."})  # fmt: skip
    processors: Optional[List[ProcessorNodeBase]] = field(default=None, metadata={"description": "List of the topology processor nodes. Processor nodes enable pipeline data to be analyzed, processed or transformed."})  # fmt: skip
    sinks: Optional[List[SinkNodeBase]] = field(default=None, metadata={"description": "List of the topology sink nodes. Sink nodes allow pipeline data to be stored or exported."})  # fmt: skip


@define
class PipelineTopologyUpdate(ProxyResource):
    properties: Optional[PipelineTopologyPropertiesUpdate] = field(default=None, metadata={"description": "Describes the properties of a pipeline topology."})  # fmt: skip
    kind: Optional[PipelineTopologyUpdateKind] = field(default=None, metadata={"description": "Topology kind."})
    sku: Optional[Sku] = field(default=None, metadata={"description": "The SKU details."})


@define
class PrivateEndpoint:
    id: Optional[str] = field(default=None, metadata={"description": "The ARM identifier for Private Endpoint"})


@define
class PrivateEndpointConnection(Resource):
    properties: Optional[PrivateEndpointConnectionProperties] = field(default=None, metadata={"description": "Properties of the PrivateEndpointConnectProperties."})  # fmt: skip


@define
class PrivateEndpointConnectionListResult:
    value: Optional[List[PrivateEndpointConnection]] = field(default=None, metadata={"description": "Array of private endpoint connections"})  # fmt: skip


@define
class PrivateEndpointConnectionProperties:
    private_endpoint: Optional[PrivateEndpoint] = field(default=None, metadata={"description": "The Private Endpoint resource."})  # fmt: skip
    private_link_service_connection_state: Optional[PrivateLinkServiceConnectionState] = field(default=None, metadata={"description": "A collection of information about the state of the connection between service consumer and provider."})  # fmt: skip
    provisioning_state: Optional[PrivateEndpointConnectionProvisioningState] = field(default=None, metadata={"description": "The current provisioning state."})  # fmt: skip


@define
class PrivateLinkResource(Resource):
    properties: Optional[PrivateLinkResourceProperties] = field(default=None, metadata={"description": "Properties of a private link resource."})  # fmt: skip


@define
class PrivateLinkResourceListResult:
    value: Optional[List[PrivateLinkResource]] = field(default=None, metadata={"description": "Array of private link resources"})  # fmt: skip


@define
class PrivateLinkResourceProperties:
    group_id: Optional[str] = field(default=None, metadata={"description": "The private link resource group id."})
    required_members: Optional[List[str]] = field(default=None, metadata={"description": "The private link resource required member names."})  # fmt: skip
    required_zone_names: Optional[List[str]] = field(default=None, metadata={"description": "The private link resource Private link DNS zone name."})  # fmt: skip


@define
class PrivateLinkServiceConnectionState:
    status: Optional[PrivateEndpointServiceConnectionStatus] = field(default=None, metadata={"description": "The private endpoint connection status."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "The reason for approval/rejection of the connection."})  # fmt: skip
    actions_required: Optional[str] = field(default=None, metadata={"description": "A message indicating if changes on the service provider require any updates on the consumer."})  # fmt: skip


@define
class Properties:
    service_specification: Optional[ServiceSpecification] = field(default=None, metadata={"description": "The service metric specifications."})  # fmt: skip


@define
class ResourceIdentity:
    user_assigned_identity: Optional[str] = field(default=None, metadata={"description": "The user assigned managed identity s resource identifier to use when accessing a resource."})  # fmt: skip


@define
class RsaTokenKey(TokenKey):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.RsaTokenKey", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    alg: Optional[RsaTokenKeyAlg] = field(default=None, metadata={"description": "RSA algorithm to be used: RS256, RS384 or RS512."})  # fmt: skip
    n: Optional[str] = field(default=None, metadata={"description": "RSA public key modulus."})
    e: Optional[str] = field(default=None, metadata={"description": "RSA public key exponent."})


@define
class SourceNodeBase(NodeBase):
    pass


@define
class RtspSource(SourceNodeBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.RtspSource", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    transport: Optional[RtspSourceTransport] = field(default=None, metadata={"description": "Network transport utilized by the RTSP and RTP exchange: TCP or HTTP. When using TCP, the RTP packets are interleaved on the TCP RTSP connection. When using HTTP, the RTSP messages are exchanged through long lived HTTP connections, and the RTP packages are interleaved in the HTTP connections alongside the RTSP messages."})  # fmt: skip
    endpoint: Optional[EndpointBase] = field(default=None, metadata={"description": "Base class for endpoints."})


@define
class TunnelBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class SecureIotDeviceRemoteTunnel(TunnelBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.SecureIotDeviceRemoteTunnel", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    iot_hub_name: Optional[str] = field(default=None, metadata={"description": "Name of the IoT Hub."})
    device_id: Optional[str] = field(default=None, metadata={"description": "The IoT device id to use when establishing the remote tunnel. This string is case-sensitive."})  # fmt: skip


@define
class ServiceSpecification:
    log_specifications: Optional[List[LogSpecification]] = field(default=None, metadata={"description": "List of log specifications."})  # fmt: skip
    metric_specifications: Optional[List[MetricSpecification]] = field(default=None, metadata={"description": "List of metric specifications."})  # fmt: skip


@define
class SinkNodeBase(NodeBase):
    inputs: Optional[List[NodeInput]] = field(default=None, metadata={"description": "An array of upstream node references within the topology to be used as inputs for this node."})  # fmt: skip


@define
class Sku:
    name: Optional[SkuName] = field(default=None, metadata={"description": "The SKU name."})
    tier: Optional[SkuTier] = field(default=None, metadata={"description": "The SKU tier."})


@define
class StorageAccount:
    id: Optional[str] = field(default=None, metadata={"description": "The ID of the storage account resource. Video Analyzer relies on tables, queues, and blobs. The primary storage account must be a Standard Storage account (either Microsoft.ClassicStorage or Microsoft.Storage)."})  # fmt: skip
    identity: Optional[ResourceIdentity] = field(default=None, metadata={"description": "The user assigned managed identity to use when accessing a resource."})  # fmt: skip
    status: Optional[str] = field(default=None, metadata={"description": "The current status of the storage account mapping."})  # fmt: skip


@define
class TimeSequenceBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip


@define
class TlsEndpoint(EndpointBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.TlsEndpoint", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    trusted_certificates: Optional[CertificateSource] = field(default=None, metadata={"description": "Base class for certificate sources."})  # fmt: skip
    validation_options: Optional[TlsValidationOptions] = field(default=None, metadata={"description": "Options for controlling the validation of TLS endpoints."})  # fmt: skip


@define
class TlsValidationOptions:
    ignore_hostname: Optional[str] = field(default=None, metadata={"description": "When set to true causes the certificate subject name validation to be skipped. Default is false ."})  # fmt: skip
    ignore_signature: Optional[str] = field(default=None, metadata={"description": "When set to true causes the certificate chain trust validation to be skipped. Default is false ."})  # fmt: skip


@define
class TokenClaim:
    name: Optional[str] = field(default=None, metadata={"description": "Name of the claim which must be present on the token."})  # fmt: skip
    value: Optional[str] = field(default=None, metadata={"description": "Expected value of the claim to be present on the token."})  # fmt: skip


@define
class TrackedResource(Resource):
    tags: Optional[Any] = field(default=None, metadata={"description": "Resource tags."})
    location: Optional[str] = field(default=None, metadata={"description": "The geo-location where the resource lives"})


@define
class UnsecuredEndpoint(EndpointBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.UnsecuredEndpoint", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip


@define
class UserAssignedManagedIdentities:
    pass


@define
class UserAssignedManagedIdentity:
    client_id: Optional[str] = field(default=None, metadata={"description": "The client ID."})
    principal_id: Optional[str] = field(default=None, metadata={"description": "The principal ID."})


@define
class UsernamePasswordCredentials(CredentialsBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.UsernamePasswordCredentials", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    username: Optional[str] = field(default=None, metadata={"description": "Username to be presented as part of the credentials."})  # fmt: skip
    password: Optional[str] = field(default=None, metadata={"description": "Password to be presented as part of the credentials. It is recommended that this value is parameterized as a secret string in order to prevent this value to be returned as part of the resource on API requests."})  # fmt: skip


@define
class VideoAnalyzer(TrackedResource):
    properties: Optional[VideoAnalyzerProperties] = field(default=None, metadata={"description": "The properties of the Video Analyzer account."})  # fmt: skip
    identity: Optional[VideoAnalyzerIdentity] = field(default=None, metadata={"description": "The managed identity for the Video Analyzer resource."})  # fmt: skip


@define
class VideoAnalyzerCollection:
    value: Optional[List[VideoAnalyzer]] = field(default=None, metadata={"description": "A collection of VideoAnalyzer items."})  # fmt: skip


@define
class VideoAnalyzerIdentity:
    type: Optional[str] = field(default=None, metadata={"description": "The identity type."})
    user_assigned_identities: Optional[UserAssignedManagedIdentities] = field(default=None, metadata={"description": "The User Assigned Managed Identities."})  # fmt: skip


@define
class VideoAnalyzerOperationStatus:
    name: Optional[str] = field(default=None, metadata={"description": "Operation identifier."})
    id: Optional[str] = field(default=None, metadata={"description": "Operation resource ID."})
    start_time: Optional[str] = field(default=None, metadata={"description": "Operation start time."})
    end_time: Optional[str] = field(default=None, metadata={"description": "Operation end time."})
    status: Optional[str] = field(default=None, metadata={"description": "Operation status."})
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class VideoAnalyzerPrivateEndpointConnectionOperationStatus:
    name: Optional[str] = field(default=None, metadata={"description": "Operation identifier."})
    id: Optional[str] = field(default=None, metadata={"description": "Operation resource ID."})
    start_time: Optional[str] = field(default=None, metadata={"description": "Operation start time."})
    end_time: Optional[str] = field(default=None, metadata={"description": "Operation end time."})
    status: Optional[str] = field(default=None, metadata={"description": "Operation status."})
    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error detail."})


@define
class VideoAnalyzerProperties:
    storage_accounts: Optional[List[StorageAccount]] = field(default=None, metadata={"description": "The storage accounts for this resource."})  # fmt: skip
    endpoints: Optional[List[Endpoint]] = field(default=None, metadata={"description": "The endpoints associated with this resource."})  # fmt: skip
    encryption: Optional[AccountEncryption] = field(default=None, metadata={"description": "Defines how the Video Analyzer account is (optionally) encrypted."})  # fmt: skip
    iot_hubs: Optional[List[IotHub]] = field(default=None, metadata={"description": "The IoT Hubs for this resource."})
    public_network_access: Optional[VideoAnalyzerPropertiesPublicNetworkAccess] = field(default=None, metadata={"description": "Whether or not public network access is allowed for resources under the Video Analyzer account."})  # fmt: skip
    network_access_control: Optional[NetworkAccessControl] = field(default=None, metadata={"description": "Network access control for video analyzer account."})  # fmt: skip
    provisioning_state: Optional[VideoAnalyzerPropertiesProvisioningState] = field(default=None, metadata={"description": "Provisioning state of the Video Analyzer account."})  # fmt: skip
    private_endpoint_connections: Optional[List[PrivateEndpointConnection]] = field(default=None, metadata={"description": "Private Endpoint Connections created under Video Analyzer account."})  # fmt: skip


@define
class VideoAnalyzerPropertiesUpdate:
    storage_accounts: Optional[List[StorageAccount]] = field(default=None, metadata={"description": "The storage accounts for this resource."})  # fmt: skip
    endpoints: Optional[List[Endpoint]] = field(default=None, metadata={"description": "The endpoints associated with this resource."})  # fmt: skip
    encryption: Optional[AccountEncryption] = field(default=None, metadata={"description": "Defines how the Video Analyzer account is (optionally) encrypted."})  # fmt: skip
    iot_hubs: Optional[List[IotHub]] = field(default=None, metadata={"description": "The IoT Hubs for this resource."})
    public_network_access: Optional[VideoAnalyzerPropertiesUpdatePublicNetworkAccess] = field(default=None, metadata={"description": "Whether or not public network access is allowed for resources under the Video Analyzer account."})  # fmt: skip
    network_access_control: Optional[NetworkAccessControl] = field(default=None, metadata={"description": "Network access control for video analyzer account."})  # fmt: skip
    provisioning_state: Optional[VideoAnalyzerPropertiesUpdateProvisioningState] = field(default=None, metadata={"description": "Provisioning state of the Video Analyzer account."})  # fmt: skip
    private_endpoint_connections: Optional[List[PrivateEndpointConnection]] = field(default=None, metadata={"description": "Private Endpoint Connections created under Video Analyzer account."})  # fmt: skip


@define
class VideoAnalyzerUpdate:
    tags: Optional[Any] = field(default=None, metadata={"description": "Resource tags."})
    properties: Optional[VideoAnalyzerPropertiesUpdate] = field(default=None, metadata={"description": "The properties of the Video Analyzer account."})  # fmt: skip
    identity: Optional[VideoAnalyzerIdentity] = field(default=None, metadata={"description": "The managed identity for the Video Analyzer resource."})  # fmt: skip


@define
class VideoArchival:
    retention_period: Optional[str] = field(default=None, metadata={"description": "Video retention period indicates the maximum age of the video archive segments which are intended to be kept in storage. It must be provided in the ISO8601 duration format in the granularity of days, up to a maximum of 10 years. For example, if this is set to P30D (30 days), content older than 30 days will be periodically deleted. This value can be updated at any time and the new desired retention period will be effective within 24 hours."})  # fmt: skip


@define
class VideoContentToken:
    expiration_date: Optional[datetime] = field(default=None, metadata={"description": "The content token expiration date in ISO8601 format (eg. 2021-01-01T00:00:00Z)."})  # fmt: skip
    token: Optional[str] = field(default=None, metadata={"description": "The content token value to be added to the video content URL as the value for the token query string parameter. The token is specific to a single video."})  # fmt: skip


@define
class VideoContentUrls:
    download_url: Optional[str] = field(default=None, metadata={"description": "Video file download URL. This URL can be used in conjunction with the video content authorization token to download the video MP4 file. The resulting MP4 file can be played on any standard media player. It is available when the video type is file and video file is available for consumption."})  # fmt: skip
    archive_base_url: Optional[str] = field(default=None, metadata={"description": "Video archive streaming base URL. The archived content can be automatically played by the Azure Video Analyzer player widget. Alternatively, this URL can be used in conjunction with the video content authorization token on any compatible DASH or HLS players by appending the following to the base URL:\\r \\r - HLSv4: /manifest(format=m3u8-aapl).m3u8\\r - HLS CMAF: /manifest(format=m3u8-cmaf)\\r - DASH CMAF: /manifest(format=mpd-time-cmaf)\\r \\r Moreover, an ongoing video recording can be played in live mode with latencies which are approximately double of the chosen video segment length. It is available when the video type is archive and video archiving is enabled."})  # fmt: skip
    rtsp_tunnel_url: Optional[str] = field(default=None, metadata={"description": "Video low-latency streaming URL. The live content can be automatically played by the Azure Video Analyzer player widget. Alternatively, this URL can be used in conjunction with the video content authorization token to expose a WebSocket tunneled RTSP stream. It is available when the video type is archive and a live, low-latency feed is available from the source."})  # fmt: skip
    preview_image_urls: Optional[VideoPreviewImageUrls] = field(default=None, metadata={"description": "Video preview image URLs. These URLs can be used in conjunction with the video content authorization token to download the most recent still image from the video archive in different resolutions. They are available when the video type is archive and preview images are enabled."})  # fmt: skip


@define
class VideoCreationProperties:
    title: Optional[str] = field(default=None, metadata={"description": "Optional title provided by the user. Value can be up to 256 characters long."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Optional description provided by the user. Value can be up to 2048 characters long."})  # fmt: skip
    segment_length: Optional[str] = field(default=None, metadata={"description": "Segment length indicates the length of individual content files (segments) which are persisted to storage. Smaller segments provide lower archive playback latency but generate larger volume of storage transactions. Larger segments reduce the amount of storage transactions while increasing the archive playback latency. Value must be specified in ISO8601 duration format (i.e. PT30S equals 30 seconds) and can vary between 30 seconds to 5 minutes, in 30 seconds increments. Changing this value after the initial call to create the video resource can lead to errors when uploading content to the archive. Default value is 30 seconds. This property is only allowed for topologies where kind is set to live ."})  # fmt: skip
    retention_period: Optional[str] = field(default=None, metadata={"description": "Video retention period indicates how long the video is kept in storage. Value must be specified in ISO8601 duration format (i.e. P1D equals 1 day) and can vary between 1 day to 10 years, in 1 day increments. When absent (null), all video content is retained indefinitely. This property is only allowed for topologies where kind is set to live ."})  # fmt: skip


@define
class VideoEncoderBase:
    type: Optional[str] = field(default=None, metadata={"description": "The discriminator for derived types.", "json_name": "@type", "discriminator": True})  # fmt: skip
    bitrate_kbps: Optional[str] = field(default=None, metadata={"description": "The maximum bitrate, in kilobits per second or Kbps, at which video should be encoded. If omitted, encoder sets it automatically to try and match the quality of the input video."})  # fmt: skip
    frame_rate: Optional[str] = field(default=None, metadata={"description": "The frame rate (in frames per second) of the encoded video. The value must be greater than zero, and less than or equal to 300. If omitted, the encoder uses the average frame rate of the input video."})  # fmt: skip
    scale: Optional[VideoScale] = field(default=None, metadata={"description": "The video scaling information."})


@define
class VideoEncoderH264(VideoEncoderBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.VideoEncoderH264", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip


@define
class VideoEntity(ProxyResource):
    properties: Optional[VideoProperties] = field(default=None, metadata={"description": "Application level properties for the video resource."})  # fmt: skip


@define
class VideoEntityCollection:
    value: Optional[List[VideoEntity]] = field(default=None, metadata={"description": "A collection of VideoEntity items."})  # fmt: skip
    next_link: Optional[str] = field(default=None, metadata={"description": "A link to the next page of the collection (when the collection contains too many results to return in one response).", "json_name": "@nextLink"})  # fmt: skip


@define
class VideoFlags:
    can_stream: Optional[bool] = field(default=None, metadata={"description": "Value indicating whether or not the video can be streamed. Only archive type videos can be streamed."})  # fmt: skip
    has_data: Optional[bool] = field(default=None, metadata={"description": "Value indicating whether or not there has ever been data recorded or uploaded into the video. Newly created videos have this value set to false."})  # fmt: skip
    is_in_use: Optional[bool] = field(default=None, metadata={"description": "Value indicating whether or not the video is currently being referenced be an active pipeline. The fact that is being referenced, doesn t necessarily indicate that data is being received. For example, video recording may be gated on events or camera may not be accessible at the time."})  # fmt: skip


@define
class VideoMediaInfo:
    segment_length: Optional[str] = field(default=None, metadata={"description": "Video segment length indicates the length of individual video files (segments) which are persisted to storage. Smaller segments provide lower archive playback latency but generate larger volume of storage transactions. Larger segments reduce the amount of storage transactions while increasing the archive playback latency. Value must be specified in ISO8601 duration format (i.e. PT30S equals 30 seconds) and can vary between 30 seconds to 5 minutes, in 30 seconds increments."})  # fmt: skip


@define
class VideoPreviewImageUrls:
    small: Optional[str] = field(default=None, metadata={"description": "Low resolution preview image URL."})
    medium: Optional[str] = field(default=None, metadata={"description": "Medium resolution preview image URL."})
    large: Optional[str] = field(default=None, metadata={"description": "High resolution preview image URL."})


@define
class VideoProperties:
    title: Optional[str] = field(default=None, metadata={"description": "Optional video title provided by the user. Value can be up to 256 characters long."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Optional video description provided by the user. Value can be up to 2048 characters long."})  # fmt: skip
    type: Optional[VideoPropertiesType] = field(default=None, metadata={"description": "Video content type. Different content types are suitable for different applications and scenarios."})  # fmt: skip
    flags: Optional[VideoFlags] = field(default=None, metadata={"description": "Video flags contain information about the available video actions and its dynamic properties based on the current video state."})  # fmt: skip
    content_urls: Optional[VideoContentUrls] = field(default=None, metadata={"description": "Set of URLs to the video content."})  # fmt: skip
    media_info: Optional[VideoMediaInfo] = field(default=None, metadata={"description": "Contains information about the video and audio content."})  # fmt: skip
    archival: Optional[VideoArchival] = field(default=None, metadata={"description": "Video archival properties."})


@define
class VideoPublishingOptions:
    disable_archive: Optional[str] = field(default=None, metadata={"description": "When set to true content will not be archived or recorded. This is used, for example, when the topology is used only for low latency video streaming. Default is false . If set to true , then disableRtspPublishing must be set to false ."})  # fmt: skip
    disable_rtsp_publishing: Optional[str] = field(default=None, metadata={"description": "When set to true the RTSP playback URL will not be published, disabling low latency streaming. This is used, for example, when the topology is used only for archiving content. Default is false . If set to true , then disableArchive must be set to false ."})  # fmt: skip


@define
class VideoScale:
    height: Optional[str] = field(default=None, metadata={"description": "The desired output video height."})
    width: Optional[str] = field(default=None, metadata={"description": "The desired output video width."})
    mode: Optional[VideoScaleMode] = field(default=None, metadata={"description": "Describes the video scaling mode to be applied. Default mode is Pad . If the mode is Pad or Stretch then both width and height must be specified. Else if the mode is PreserveAspectRatio then only one of width or height need be provided."})  # fmt: skip


@define
class VideoSequenceAbsoluteTimeMarkers(TimeSequenceBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.VideoSequenceAbsoluteTimeMarkers", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    ranges: Optional[str] = field(default=None, metadata={"description": "The sequence of datetime ranges. Example: [[ 2021-10-05T03:30:00Z , 2021-10-05T03:40:00Z ]] ."})  # fmt: skip


@define
class VideoSink(SinkNodeBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.VideoSink", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    video_name: Optional[str] = field(default=None, metadata={"description": "Name of a new or existing video resource used to capture and publish content. Note: if downstream of RTSP source, and if disableArchive is set to true, then no content is archived."})  # fmt: skip
    video_creation_properties: Optional[VideoCreationProperties] = field(default=None, metadata={"description": "Optional properties to be used in case a new video resource needs to be created on the service. These will not take effect if the video already exists."})  # fmt: skip
    video_publishing_options: Optional[VideoPublishingOptions] = field(default=None, metadata={"description": "Optional flags used to change how video is published. These are only allowed for topologies where kind is set to live ."})  # fmt: skip


@define
class VideoSource(SourceNodeBase):
    type: Optional[str] = field(default="#Microsoft.VideoAnalyzer.VideoSource", metadata={"json_name": "@type", "discriminator": True})  # fmt: skip
    video_name: Optional[str] = field(default=None, metadata={"description": "Name of the Video Analyzer video resource to be used as the source."})  # fmt: skip
    time_sequences: Optional[TimeSequenceBase] = field(default=None, metadata={"description": "A sequence of datetime ranges as a string."})  # fmt: skip


@define
class SystemData:
    created_by: Optional[str] = field(default=None, metadata={"description": "The identity that created the resource."})
    created_by_type: Optional[CreatedByType] = field(default=None, metadata={"description": "The type of identity that created the resource."})  # fmt: skip
    created_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource creation (UTC)."})  # fmt: skip
    last_modified_by: Optional[str] = field(default=None, metadata={"description": "The identity that last modified the resource."})  # fmt: skip
    last_modified_by_type: Optional[LastModifiedByType] = field(default=None, metadata={"description": "The type of identity that last modified the resource."})  # fmt: skip
    last_modified_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource last modification (UTC)"})  # fmt: skip


register_subtypes(AudioEncoderBase, "@type", {"#Microsoft.VideoAnalyzer.AudioEncoderAac": AudioEncoderAac})
register_subtypes(AuthenticationBase, "@type", {"#Microsoft.VideoAnalyzer.JwtAuthentication": JwtAuthentication})
register_subtypes(CertificateSource, "@type", {"#Microsoft.VideoAnalyzer.PemCertificateList": PemCertificateList})
register_subtypes(
    CredentialsBase, "@type", {"#Microsoft.VideoAnalyzer.UsernamePasswordCredentials": UsernamePasswordCredentials}
)
register_subtypes(
    EncoderPresetBase,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.EncoderCustomPreset": EncoderCustomPreset,
        "#Microsoft.VideoAnalyzer.EncoderSystemPreset": EncoderSystemPreset,
    },
)
register_subtypes(
    EndpointBase,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.TlsEndpoint": TlsEndpoint,
        "#Microsoft.VideoAnalyzer.UnsecuredEndpoint": UnsecuredEndpoint,
    },
)
register_subtypes(
    NodeBase,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.EncoderProcessor": EncoderProcessor,
        "#Microsoft.VideoAnalyzer.VideoSink": VideoSink,
        "#Microsoft.VideoAnalyzer.RtspSource": RtspSource,
        "#Microsoft.VideoAnalyzer.VideoSource": VideoSource,
    },
)
register_subtypes(ProcessorNodeBase, "@type", {"#Microsoft.VideoAnalyzer.EncoderProcessor": EncoderProcessor})
register_subtypes(SinkNodeBase, "@type", {"#Microsoft.VideoAnalyzer.VideoSink": VideoSink})
register_subtypes(
    SourceNodeBase,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.RtspSource": RtspSource,
        "#Microsoft.VideoAnalyzer.VideoSource": VideoSource,
    },
)
register_subtypes(
    TimeSequenceBase,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.VideoSequenceAbsoluteTimeMarkers": VideoSequenceAbsoluteTimeMarkers,
    },
)
register_subtypes(
    TokenKey,
    "@type",
    {
        "#Microsoft.VideoAnalyzer.EccTokenKey": EccTokenKey,
        "#Microsoft.VideoAnalyzer.RsaTokenKey": RsaTokenKey,
    },
)
register_subtypes(
    TunnelBase, "@type", {"#Microsoft.VideoAnalyzer.SecureIotDeviceRemoteTunnel": SecureIotDeviceRemoteTunnel}
)
register_subtypes(VideoEncoderBase, "@type", {"#Microsoft.VideoAnalyzer.VideoEncoderH264": VideoEncoderH264})
