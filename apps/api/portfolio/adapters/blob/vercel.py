"""Vercel Blob store adapter over the blob HTTP API."""

from __future__ import annotations

import logging

import httpx

from portfolio.adapters.blob.base import BlobObject, BlobStore, BlobStoreError

logger = logging.getLogger(__name__)

_API_VERSION = "7"
_PAGE_LIMIT = 1000


class VercelBlobStore(BlobStore):
    """Lists blobs through the Vercel Blob REST endpoint, following cursors."""

    def __init__(self, token: str, *, api_url: str = "https://blob.vercel-storage.com", client: httpx.Client | None = None) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._client = client or httpx.Client(timeout=10.0)

    def list_objects(self) -> list[BlobObject]:
        objects: list[BlobObject] = []
        cursor: str | None = None
        while True:
            params: dict[str, str | int] = {"limit": _PAGE_LIMIT}
            if cursor:
                params["cursor"] = cursor
            payload = self._get_page(params)

            for entry in payload.get("blobs", []):
                objects.append(BlobObject(url=str(entry.get("url", "")), pathname=str(entry.get("pathname", ""))))

            cursor = payload.get("cursor")
            if not payload.get("hasMore") or not cursor:
                return objects

    def close(self) -> None:
        self._client.close()

    def _get_page(self, params: dict[str, str | int]) -> dict:
        try:
            response = self._client.get(
                f"{self._api_url}/",
                params=params,
                headers={"Authorization": f"Bearer {self._token}", "x-api-version": _API_VERSION},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("blob.list_failed status=%s", exc.response.status_code)
            raise BlobStoreError(f"Blob listing failed with status {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning("blob.list_failed error=%s", type(exc).__name__)
            raise BlobStoreError(f"Blob listing failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise BlobStoreError("Blob listing returned invalid JSON") from exc
