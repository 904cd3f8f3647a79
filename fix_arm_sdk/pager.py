from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, AsyncIterator, Dict, Generic, List, Optional, Type, TypeVar

from azure.core.rest import HttpRequest

if TYPE_CHECKING:
    from fix_arm_sdk.arm_client import ArmClient, ArmOperation

log = logging.getLogger("fix.arm")

PageT = TypeVar("PageT")
ItemT = TypeVar("ItemT")


class Pageable(Generic[PageT, ItemT]):
    """
    Lazy sequence of the pages of a list operation.

    Nothing is requested until the sequence is iterated.
    Every iteration starts with the first page: `async for page in pageable`.
    The next page is requested via the continuation link (next_link) of the current page.
    The sequence ends with the first page that does not define a continuation link.
    """

    def __init__(self, client: ArmClient, spec: ArmOperation, page_type: Type[PageT], arguments: Dict[str, Any]):
        self.client = client
        self.spec = spec
        self.page_type = page_type
        self.arguments = arguments

    def __aiter__(self) -> AsyncIterator[PageT]:
        return self.by_page()

    async def by_page(self) -> AsyncIterator[PageT]:
        params = self.spec.query(**self.arguments)
        request: Optional[HttpRequest] = self.spec.request(self.client.endpoint, **self.arguments)
        count = 0
        while request is not None:
            page = await self.client.fetch_page(self.spec, request, self.page_type)
            count += 1
            yield page
            next_link: Optional[str] = getattr(page, "next_link", None)
            request = self.client.next_page_request(next_link, params) if next_link else None
        log.debug(f"[{self.spec.service}] {self.spec.path}: read {count} page(s)")

    async def items(self) -> AsyncIterator[ItemT]:
        """
        All elements of all pages in order.
        """
        async for page in self.by_page():
            for item in getattr(page, "value", None) or []:
                yield item

    async def to_list(self) -> List[ItemT]:
        return [item async for item in self.items()]
