from typing import ClassVar, Optional, List, Union

from attr import define, field
from azure.identity.aio import DefaultAzureCredential, ClientSecretCredential

ArmCredentials = Union[DefaultAzureCredential, ClientSecretCredential]
DefaultEndpoint = "https://management.azure.com"


@define
class ArmClientSecretConfig:
    kind: ClassVar[str] = "arm_client_secret"
    tenant_id: str = field(metadata={"description": "Azure tenant ID"})
    client_id: str = field(metadata={"description": "Azure client ID"})
    client_secret: str = field(metadata={"description": "Azure client secret"})


@define
class ArmCredentialConfig:
    kind: ClassVar[str] = "arm_credential"

    client_secret: Optional[ArmClientSecretConfig] = field(
        default=None,
        metadata={
            "description": "If you can not provide access via the environment, define access with a client secret.\nIf no secret is provided the default credential chain will be used.\nSee https://docs.microsoft.com/en-us/azure/developer/python/azure-sdk-authenticate?tabs=cmd#environment-variables for more information."  # noqa: E501
        },
    )

    def credentials(self) -> ArmCredentials:
        if cs := self.client_secret:
            return ClientSecretCredential(
                tenant_id=cs.tenant_id,
                client_id=cs.client_id,
                client_secret=cs.client_secret,
            )

        return DefaultAzureCredential(process_timeout=300)


@define
class ArmClientConfig:
    kind: ClassVar[str] = "arm_client"

    endpoint: str = field(
        default=DefaultEndpoint,
        metadata={"description": "The Azure Resource Manager endpoint. Sovereign clouds use a different one."},
    )
    scopes: Optional[List[str]] = field(
        default=None,
        metadata={"description": "Scopes of the bearer token. If not defined: <endpoint>/.default"},
    )
    retry_total: int = field(
        default=3,
        metadata={"description": "Number of retries done by the request pipeline. Set to 0 to disable retries."},
    )
    retry_backoff_factor: float = field(
        default=0.8, metadata={"description": "Backoff factor between retries in seconds."}
    )
    timeout: int = field(
        default=120, metadata={"description": "Timeout of a single request in seconds."}
    )
    user_agent: Optional[str] = field(
        default=None, metadata={"description": "Additional user agent, prepended to the azure-core user agent."}
    )
    logging_enable: bool = field(
        default=False,
        metadata={"description": "Log all requests and responses including body and headers on debug level."},
    )
    token_refresh_margin: int = field(
        default=300,
        metadata={"description": "Get a new token, if the cached one expires within this number of seconds."},
    )

    def token_scopes(self) -> List[str]:
        return self.scopes if self.scopes else [f"{self.endpoint.rstrip('/')}/.default"]
