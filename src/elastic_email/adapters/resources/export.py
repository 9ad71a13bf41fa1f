"""Recurso `export`: exports asíncronos generados por otros recursos."""

from __future__ import annotations

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import ExportStatus
from elastic_email.core.domain.models import Export


class ExportResource(ApiResource):
    async def check_status(self, public_export_id: str) -> ExportStatus:
        params = FormParams().add("publicExportID", public_export_id)
        return await self._post("/export/checkstatus", params, ExportStatus)

    async def delete(self, public_export_id: str) -> None:
        await self._post("/export/delete", FormParams().add("publicExportID", public_export_id))

    async def list(self, *, limit: int | None = None, offset: int | None = None) -> list[Export]:
        params = FormParams().add("limit", limit).add("offset", offset)
        return await self._post("/export/list", params, list[Export]) or []
