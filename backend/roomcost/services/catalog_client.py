"""HTTP client for the remote BOM catalog (a Strapi-style REST backend)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from roomcost.exceptions import CatalogFetchError
from roomcost.models.bom import CatalogPage

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class CatalogClient:
    """Thin wrapper around ``httpx.Client`` for catalog collections.

    Every failure (transport error, timeout, non-2xx status, malformed
    body) is raised as CatalogFetchError so callers handle a single type.

    Args:
        base_url: Catalog API root, e.g. ``https://backend.example.com/api``.
        token: Optional bearer token sent with every request.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_page(
        self,
        endpoint: str,
        page: int,
        page_size: int,
        params: dict[str, Any] | None = None,
    ) -> CatalogPage:
        """Fetch a single page of ``endpoint``.

        Raises
        ------
        CatalogFetchError
            If the request fails or the response is not a valid page.
        """
        query: dict[str, Any] = dict(params or {})
        query["pagination[page]"] = page
        query["pagination[pageSize]"] = page_size

        payload = self._request("GET", endpoint, params=query)
        try:
            return CatalogPage.from_payload(payload)
        except (ValidationError, ValueError) as exc:
            msg = f"Malformed page {page} from {endpoint}: {exc}"
            raise CatalogFetchError(msg) from exc

    def create(self, endpoint: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create one record in ``endpoint`` and return the stored record."""
        payload = self._request("POST", endpoint, json={"data": data})
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            return payload["data"]
        return {}

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            msg = f"{method} {endpoint} timed out"
            raise CatalogFetchError(msg) from exc
        except httpx.HTTPStatusError as exc:
            msg = (
                f"{method} {endpoint} returned HTTP "
                f"{exc.response.status_code}"
            )
            raise CatalogFetchError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"{method} {endpoint} failed: {exc}"
            raise CatalogFetchError(msg) from exc

        try:
            return response.json()
        except ValueError as exc:
            msg = f"{method} {endpoint} returned a non-JSON body"
            raise CatalogFetchError(msg) from exc
