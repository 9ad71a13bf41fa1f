"""Base de los facades de recursos.

Cada método público de un recurso:
1. construye un `FormParams` con lo que el caller fijó (nada más),
2. delega en el transporte (`post`, `upload_files` + `decode`, `download_file`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from elastic_email.adapters.envelope import decode
from elastic_email.adapters.form_encoder import FormParams
from elastic_email.core.domain.models import FilePayload
from elastic_email.core.interfaces.transport import ApiTransport


class ApiResource:
    """Agrupa las operaciones de un recurso del API (`/contact/*`, `/list/*`...)."""

    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport

    async def _post(self, path: str, params: FormParams, result_type: Any = None) -> Any:
        return await self._transport.post(path, params.items(), result_type)

    async def _upload(
        self,
        path: str,
        files: Sequence[FilePayload],
        params: FormParams,
        result_type: Any = None,
    ) -> Any:
        body = await self._transport.upload_files(path, files, params.items())
        return decode(body, result_type)

    async def _download(self, path: str, params: FormParams) -> FilePayload | None:
        return await self._transport.download_file(path, params.items())
