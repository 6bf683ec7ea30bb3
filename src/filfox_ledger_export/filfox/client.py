from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .. import __version__
from ..errors import APIError, DecodeError, NetworkError
from .models import FilfoxTransferRecord, FilfoxTransfersPage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://filfox.info/api/v1"
DEFAULT_PAGE_SIZE = 100


class FilfoxClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 20.0,
        transport: httpx.BaseTransport | None = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be >= 1")

        self._base_url = base_url.rstrip("/")
        self._page_size = page_size

        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"User-Agent": f"filfox-ledger-export/{__version__}"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> FilfoxClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request_json(self, path: str, params: dict[str, int]) -> object:
        url = f"{self._base_url}{path}"
        logger.debug("API call: %s params=%s", url, params)

        try:
            resp = self._client.get(path, params=params)
        except httpx.TransportError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

        if resp.status_code != httpx.codes.OK:
            raise APIError(
                resp.status_code,
                str(resp.url),
                f"{resp.reason_phrase}. Response: {resp.text[:200]}",
            )

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(str(resp.url), str(e)) from e

    def transfers_page(self, wallet: str, page: int) -> FilfoxTransfersPage:
        path = f"/address/{wallet}/transfers"
        data = self._request_json(path, {"pageSize": self._page_size, "page": page})
        try:
            return FilfoxTransfersPage.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"{self._base_url}{path}?page={page}", str(e)) from e

    def transfers(self, wallet: str) -> list[FilfoxTransferRecord]:
        """
        Fetch every transfer record of a wallet, page by page.

        Paging stops once the number of collected records reaches the
        totalCount reported by the first page. Records are returned in
        server order, without dedup.
        """
        out: list[FilfoxTransferRecord] = []
        total_count: int | None = None
        page = 0

        while True:
            batch = self.transfers_page(wallet, page)
            if total_count is None:
                total_count = batch.totalCount

            out.extend(batch.transfers)

            if len(out) >= total_count:
                break

            if not batch.transfers:
                raise APIError(
                    200,
                    f"{self._base_url}/address/{wallet}/transfers?page={page}",
                    f"Empty page before reaching totalCount ({len(out)}/{total_count})",
                )

            page += 1

        return out
