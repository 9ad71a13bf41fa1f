"""Recurso `file`: ficheros/adjuntos almacenados en la cuenta.

`upload` y `download` son los dos únicos métodos que no usan el POST
form-encoded: van por multipart y por GET con query string.
"""

from __future__ import annotations

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.models import FileInfo, FilePayload


class FileResource(ApiResource):
    async def delete(self, *, file_id: int | None = None, filename: str | None = None) -> None:
        params = FormParams().add("fileID", file_id).add("filename", filename)
        await self._post("/file/delete", params)

    async def download(self, *, filename: str | None = None, file_id: int | None = None) -> FilePayload | None:
        params = FormParams().add("filename", filename).add("fileID", file_id)
        return await self._download("/file/download", params)

    async def list(self, *, msg_id: str | None = None, filename: str | None = None) -> list[FileInfo]:
        params = FormParams().add("msgID", msg_id).add("filename", filename)
        return await self._post("/file/list", params, list[FileInfo]) or []

    async def list_all(self) -> list[FileInfo]:
        return await self._post("/file/listall", FormParams(), list[FileInfo]) or []

    async def load(self, filename: str) -> FileInfo:
        return await self._post("/file/load", FormParams().add("filename", filename), FileInfo)

    async def upload(
        self,
        file: FilePayload,
        *,
        name: str | None = None,
        expires_after_days: int | None = None,
        enforce_unique_file_name: bool | None = None,
    ) -> FileInfo:
        params = (
            FormParams()
            .add("name", name)
            .add("expiresAfterDays", expires_after_days)
            .add("enforceUniqueFileName", enforce_unique_file_name)
        )
        return await self._upload("/file/upload", [file], params, FileInfo)
