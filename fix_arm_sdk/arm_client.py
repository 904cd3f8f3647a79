from __future__ import annotations

import asyncio
import logging
import time
from http import HTTPStatus
from string import Formatter
from types import TracebackType
from typing import List, Optional, Any, Dict, Type, TypeVar, Generic
from urllib.parse import quote, urljoin, urlparse, parse_qs

from attr import define, field, frozen
from azure.core import AsyncPipelineClient
from azure.core.credentials import AccessToken
from azure.core.credentials_async import AsyncTokenCredential
from azure.core.exceptions import (
    ClientAuthenticationError,
    DecodeError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
    ResourceNotModifiedError,
    map_error,
)
from azure.core.pipeline.policies import (
    AsyncRetryPolicy,
    HeadersPolicy,
    HttpLoggingPolicy,
    NetworkTraceLoggingPolicy,
    UserAgentPolicy,
)
from azure.core.pipeline.transport import AioHttpTransport, AsyncHttpTransport
from azure.core.rest import HttpRequest, AsyncHttpResponse
from azure.mgmt.core.exceptions import ARMErrorFormat

from fix_arm_sdk import __version__
from fix_arm_sdk.config import ArmClientConfig
from fix_arm_sdk.json import to_json, from_json
from fix_arm_sdk.pager import Pageable

log = logging.getLogger("fix.arm")

T = TypeVar("T")
ServiceClientT = TypeVar("ServiceClientT", bound="ArmServiceClient")
ErrorMap = {
    304: ResourceNotModifiedError,
    401: ClientAuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceExistsError,
}
# marks a status code that is accepted, but does not carry a body
NoBody = None


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


@frozen
class ArmResponse(Generic[T]):
    """
    Result of an operation that accepts more than one status code.
    All accepted status codes with a body deserialize into the same type, only the status tells them apart.
    """

    status: HTTPStatus
    value: Optional[T] = None

    @property
    def created(self) -> bool:
        return self.status == HTTPStatus.CREATED

    @property
    def accepted(self) -> bool:
        return self.status == HTTPStatus.ACCEPTED


@define(frozen=True)
class ArmOperation:
    """
    Declarative description of a single ARM REST operation.
    Path parameters are defined as python names in the path template: /labs/{lab_name}.
    """

    service: str
    method: str
    path: str
    version: str
    # accepted status code -> type of the response body (NoBody if there is none)
    responses: Dict[int, Optional[type]] = field(factory=lambda: {200: NoBody})
    # python argument name -> query parameter name, e.g. expand -> $expand
    query_parameters: Dict[str, str] = field(factory=dict)
    # type of the request body, if this operation accepts one
    body: Optional[type] = None

    @property
    def path_parameters(self) -> List[str]:
        return [name for _, name, _, _ in Formatter().parse(self.path) if name]

    @property
    def single_response(self) -> bool:
        return len(self.responses) == 1

    def query(self, **kwargs: Any) -> Dict[str, str]:
        params = {"api-version": query_value(self.version)}
        for name, wire_name in self.query_parameters.items():
            if (value := kwargs.get(name)) is not None:
                params[wire_name] = query_value(value)
        return params

    def request(self, endpoint: str, body: Optional[Any] = None, **kwargs: Any) -> HttpRequest:
        # Construct the path map
        path_map: Dict[str, str] = {}
        for param in self.path_parameters:
            if (value := kwargs.get(param)) is not None and value != "":
                path_map[param] = quote(str(value), safe="")
            else:
                raise ValueError(f"{self.service}:{self.path}: Path parameter {param} was not provided as argument.")

        headers = {"Accept": "application/json"}
        url = endpoint.rstrip("/") + self.path.format_map(path_map)
        if body is not None:
            return HttpRequest(self.method, url, params=self.query(**kwargs), headers=headers, json=to_json(body))
        if self.method in ("POST", "PUT", "PATCH"):
            headers["Content-Length"] = "0"
        return HttpRequest(self.method, url, params=self.query(**kwargs), headers=headers)


class CredentialsTokenCache:
    def __init__(self, credential: AsyncTokenCredential, scopes: List[str], refresh_margin: int = 300) -> None:
        self.credential = credential
        self.scopes = scopes
        self.refresh_margin = refresh_margin
        self._token: Optional[AccessToken] = None
        # created on first use, so it belongs to the running event loop
        self._lock: Optional[asyncio.Lock] = None

    def _valid(self, token: AccessToken) -> bool:
        return token.expires_on - self.refresh_margin > time.time()

    async def token(self) -> str:
        token = self._token
        if token is None or not self._valid(token):
            if self._lock is None:
                self._lock = asyncio.Lock()
            async with self._lock:
                # concurrent callers wait for the first refresh
                token = self._token
                if token is None or not self._valid(token):
                    log.debug(f"Request new token for scopes {self.scopes}")
                    token = self._token = await self.credential.get_token(*self.scopes)
        return token.token


class ArmClient:
    """
    Sends requests described by an ArmOperation to the Azure Resource Manager endpoint.
    Retries and transport are handled by the azure-core pipeline.
    """

    def __init__(self, credential: AsyncTokenCredential, config: ArmClientConfig, client: AsyncPipelineClient) -> None:
        self.credential = credential
        self.config = config
        self.endpoint = config.endpoint.rstrip("/")
        self.token_cache = CredentialsTokenCache(credential, config.token_scopes(), config.token_refresh_margin)
        self._client = client

    @staticmethod
    def create(
        credential: AsyncTokenCredential,
        config: Optional[ArmClientConfig] = None,
        transport: Optional[AsyncHttpTransport] = None,
    ) -> ArmClient:
        config = config or ArmClientConfig()
        policies = [
            HeadersPolicy(),
            UserAgentPolicy(user_agent=config.user_agent, sdk_moniker=f"fix-arm-sdk/{__version__}"),
            AsyncRetryPolicy(retry_total=config.retry_total, retry_backoff_factor=config.retry_backoff_factor),
            NetworkTraceLoggingPolicy(logging_enable=config.logging_enable),
            HttpLoggingPolicy(),
        ]
        client = AsyncPipelineClient(
            base_url=config.endpoint, policies=policies, transport=transport or AioHttpTransport()
        )
        return ArmClient(credential, config, client)

    async def send(self, spec: ArmOperation, request: HttpRequest) -> AsyncHttpResponse:
        token = await self.token_cache.token()
        request.headers["Authorization"] = f"Bearer {token}"
        log.debug(f"[{spec.service}] {request.method} {request.url}")
        response = await self._client.send_request(
            request, stream=False, connection_timeout=self.config.timeout, read_timeout=self.config.timeout
        )
        return response

    @staticmethod
    def raise_for_status(spec: ArmOperation, response: AsyncHttpResponse) -> None:
        log.debug(f"[{spec.service}] {spec.method} {spec.path}: unexpected status {response.status_code}")
        map_error(status_code=response.status_code, response=response, error_map=ErrorMap)
        raise HttpResponseError(response=response, error_format=ARMErrorFormat)

    @staticmethod
    def parse(response: AsyncHttpResponse, clazz: Optional[Type[T]]) -> Optional[T]:
        if clazz is None:
            return None
        try:
            js = response.json()
        except ValueError as e:
            raise DecodeError(message=f"Response body is not valid json: {e}", response=response) from e
        try:
            return from_json(js, clazz)
        except Exception as e:
            raise DecodeError(message=f"Can not read response as {clazz.__name__}: {e}", response=response) from e

    async def call(self, spec: ArmOperation, body: Optional[Any] = None, **kwargs: Any) -> Any:
        """
        Execute the operation and return the result.
        Operations that accept a single status return the body (None if there is no body).
        Operations that accept several status codes return an ArmResponse.
        """
        request = spec.request(self.endpoint, body, **kwargs)
        response = await self.send(spec, request)
        status = response.status_code
        if status not in spec.responses:
            self.raise_for_status(spec, response)
        value = self.parse(response, spec.responses[status])
        return value if spec.single_response else ArmResponse(HTTPStatus(status), value)

    async def fetch_page(self, spec: ArmOperation, request: HttpRequest, page_type: Type[T]) -> T:
        response = await self.send(spec, request)
        if response.status_code != 200:
            self.raise_for_status(spec, response)
        page = self.parse(response, page_type)
        if page is None:
            raise DecodeError(message="Page without content", response=response)
        return page

    def next_page_request(self, next_link: str, params: Dict[str, str]) -> HttpRequest:
        """
        Request the page behind the continuation link.
        Relative links are resolved against the endpoint.
        Query parameters of the first request are only added, if the link does not define them already.
        """
        url = urljoin(self.endpoint + "/", next_link)
        defined = parse_qs(urlparse(url).query, keep_blank_values=True)
        missing = {k: v for k, v in params.items() if k not in defined}
        return HttpRequest("GET", url, params=missing, headers={"Accept": "application/json"})

    def pageable(self, spec: ArmOperation, page_type: Type[Any], **kwargs: Any) -> Pageable[Any, Any]:
        return Pageable(self, spec, page_type, kwargs)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> ArmClient:
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self._client.__aexit__(exc_type, exc_val, exc_tb)


class OperationGroup:
    def __init__(self, client: ArmClient) -> None:
        self.client = client


class ArmServiceClient:
    """
    Base of all service clients: one attribute per operation group.
    """

    def __init__(self, client: ArmClient) -> None:
        self.client = client

    @classmethod
    def create(
        cls: Type[ServiceClientT],
        credential: AsyncTokenCredential,
        config: Optional[ArmClientConfig] = None,
        transport: Optional[AsyncHttpTransport] = None,
    ) -> ServiceClientT:
        return cls(ArmClient.create(credential, config, transport))

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self: ServiceClientT) -> ServiceClientT:
        await self.client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

