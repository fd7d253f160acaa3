"""Base resource for ScalePad API collections.

A resource maps one base path onto the generic list/get operations and the
pagination helpers. Every successful response is checked against the
expected shape with pydantic before it is returned.
"""

from typing import Any, AsyncIterator, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import ResponseValidationError
from ..models.filter import Filters
from ..models.pagination import ListResult
from ..services.logger import Logger
from ..utils.filter import encode_filters
from ..utils.http_client import HttpClient
from ..utils.pagination import collect_all, paginate_items, paginate_pages
from ..utils.sort import SortParamName, SortSpec, add_sort_to_params

T = TypeVar("T")


class BaseResource(Generic[T]):
    """Generic list/get operations for a resource collection."""

    def __init__(
        self,
        http_client: HttpClient,
        logger: Logger,
        base_path: str,
        item_type: Type[Any] = Any,  # type: ignore[assignment]
        sort_param_name: SortParamName = "sort",
    ):
        """Initialize resource.

        Args:
            http_client: HttpClient instance
            logger: Logger instance
            base_path: Collection path, e.g. ``/core/v1/clients``
            item_type: Expected item type used for the contract check
            sort_param_name: Query parameter carrying sort specifications

        """
        self.http_client = http_client
        self.logger = logger
        self.base_path = base_path
        self.item_type = item_type
        self.sort_param_name = sort_param_name
        self._item_adapter: TypeAdapter[Any] = TypeAdapter(item_type)
        self._envelope_model = ListResult[item_type]  # type: ignore[valid-type]

    def build_list_params(
        self,
        page_size: Optional[int] = None,
        cursor: Optional[str] = None,
        filters: Optional[Filters] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[Tuple[str, str]]:
        """Build query parameters for list operations."""
        params: List[Tuple[str, str]] = []
        if page_size:
            params.append(("page_size", str(page_size)))
        if cursor:
            params.append(("cursor", cursor))
        params.extend(encode_filters(filters))
        add_sort_to_params(params, sort, self.sort_param_name)
        return params

    async def list(
        self,
        page_size: Optional[int] = None,
        cursor: Optional[str] = None,
        filters: Optional[Filters] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> ListResult[T]:
        """List resources with optional filtering and sorting.

        Args:
            page_size: Items per page (optional)
            cursor: Cursor from a previous page (optional)
            filters: Field filters (optional)
            sort: Sort specifications (optional)

        Returns:
            Validated page envelope

        Raises:
            ResponseValidationError: If the response does not match the envelope shape
            RequestError: If the request fails

        """
        params = self.build_list_params(page_size, cursor, filters, sort)
        response = await self.http_client.get(self.base_path, params)
        try:
            return self._envelope_model.model_validate(response)
        except ValidationError as e:
            self.logger.error(f"Invalid list response from {self.base_path}")
            raise ResponseValidationError("Invalid response format", e.errors()) from e

    async def get_by_id(self, id: str) -> T:
        """Get a single resource by ID.

        Raises:
            ResponseValidationError: If the response does not match the item shape
            RequestError: If the request fails

        """
        path = f"{self.base_path}/{id}"
        response = await self.http_client.get(path)
        try:
            return self._item_adapter.validate_python(response)
        except ValidationError as e:
            self.logger.error(f"Invalid item response from {path}")
            raise ResponseValidationError("Invalid response format", e.errors()) from e

    def _page_fetcher(
        self,
        page_size: Optional[int],
        filters: Optional[Filters],
        sort: Optional[Sequence[SortSpec]],
    ):
        async def fetch_page(cursor: Optional[str]) -> ListResult[T]:
            return await self.list(page_size=page_size, cursor=cursor, filters=filters, sort=sort)

        return fetch_page

    def paginate(
        self,
        page_size: Optional[int] = None,
        filters: Optional[Filters] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> AsyncIterator[List[T]]:
        """Iterate over pages of resources (single pass)."""
        return paginate_pages(self._page_fetcher(page_size, filters, sort))

    def paginate_items(
        self,
        page_size: Optional[int] = None,
        filters: Optional[Filters] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> AsyncIterator[T]:
        """Iterate over individual resources across pages (single pass)."""
        return paginate_items(self._page_fetcher(page_size, filters, sort))

    async def collect_all(
        self,
        page_size: Optional[int] = None,
        filters: Optional[Filters] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[T]:
        """Fetch every page and return all resources."""
        return await collect_all(self._page_fetcher(page_size, filters, sort))
