"""Transporte HTTP sobre `httpx.AsyncClient`.

Tres caminos, un round trip cada uno:
- `post`: form-encoded POST + envelope codec.
- `upload_files`: multipart POST; devuelve el body crudo (lo decodifica el facade).
- `download_file`: GET con query string y lectura en streaming.

No hay reintentos ni caché: cualquier error sube al caller tal cual.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import urlencode

import httpx

from elastic_email.adapters.envelope import decode, parse_envelope
from elastic_email.adapters.multipart import encode_multipart, extract_filename
from elastic_email.core.domain.models import FilePayload
from elastic_email.core.errors import ApiError, NotFoundError, TransportError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpTransport:
    """Implementación de `ApiTransport` que añade `apikey` a cada request."""

    def __init__(self, client: httpx.AsyncClient, *, api_key: str | None = None) -> None:
        self._client = client
        self._api_key = api_key

    def _with_key(self, params: Sequence[tuple[str, str]]) -> list[tuple[str, str]]:
        items = [(k, v) for k, v in params if k != "apikey"]
        if self._api_key:
            items.insert(0, ("apikey", self._api_key))
        return items

    @staticmethod
    def _log_request(method: str, path: str, params: Sequence[tuple[str, str]]) -> None:
        # Solo nombres: los valores pueden incluir la API key o datos personales.
        names = sorted({k for k, _ in params if k != "apikey"})
        logger.debug("%s %s params=%s", method, path, names)

    @staticmethod
    def _raise_for_status(response: httpx.Response, body: bytes) -> None:
        if 200 <= response.status_code < 300:
            return
        reason = response.reason_phrase or f"HTTP {response.status_code}"
        logger.debug("HTTP %s from %s: %s", response.status_code, response.request.url.path, reason)
        raise TransportError(
            reason,
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            raise TransportError(f"network error: {exc}") from exc

    async def post(self, path: str, params: Sequence[tuple[str, str]], result_type: Any = None) -> Any:
        self._log_request("POST", path, params)
        response = await self._send(
            "POST",
            path,
            content=urlencode(self._with_key(params)).encode("ascii"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
        self._raise_for_status(response, response.content)
        return decode(response.content, result_type)

    async def upload_files(
        self,
        path: str,
        files: Sequence[FilePayload],
        params: Sequence[tuple[str, str]],
    ) -> bytes:
        self._log_request("POST(multipart)", path, params)
        body, boundary = encode_multipart(self._with_key(params), files)
        response = await self._send(
            "POST",
            path,
            content=body,
            headers={"Content-Type": f"multipart/form-data; boundary={boundary}"},
        )
        self._raise_for_status(response, response.content)
        return response.content

    async def download_file(self, path: str, params: Sequence[tuple[str, str]]) -> FilePayload | None:
        """Descarga un fichero.

        Precedencia:
        1. status no 2xx -> `TransportError`
        2. body vacío -> `NotFoundError` (sin mirar headers)
        3. sin `Content-Disposition` -> envelope: `ApiError` si falló, si no `None`
        4. fichero con nombre del header y `Content-Type` de la respuesta
        """

        self._log_request("GET", path, params)
        try:
            async with self._client.stream("GET", path, params=self._with_key(params)) as response:
                body = await response.aread()
        except httpx.TransportError as exc:
            raise TransportError(f"network error: {exc}") from exc

        self._raise_for_status(response, body)

        if not body:
            raise NotFoundError(f"no file available at {path}")

        disposition = response.headers.get("content-disposition")
        if disposition is None:
            envelope = parse_envelope(body)
            if not envelope.success:
                raise ApiError(envelope.error or "")
            return None

        file_name = extract_filename(disposition) or path.rstrip("/").rsplit("/", 1)[-1]
        return FilePayload(
            content=body,
            file_name=file_name,
            content_type=response.headers.get("content-type"),
        )
