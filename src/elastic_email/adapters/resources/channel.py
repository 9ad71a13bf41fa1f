"""Recurso `channel`: agrupaciones de envíos (no confundir con campaigns)."""

from __future__ import annotations

from collections.abc import Sequence

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import CompressionFormat
from elastic_email.core.domain.models import Channel, ExportLink


class ChannelResource(ApiResource):
    async def add(self, name: str) -> str:
        return await self._post("/channel/add", FormParams().add("name", name), str)

    async def delete(self, name: str) -> None:
        await self._post("/channel/delete", FormParams().add("name", name))

    async def _export(
        self,
        path: str,
        channel_names: Sequence[str],
        compression_format: CompressionFormat | None,
        file_name: str | None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add_list("channelNames", channel_names)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post(path, params, ExportLink)

    async def export_csv(
        self,
        channel_names: Sequence[str],
        *,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        return await self._export("/channel/exportcsv", channel_names, compression_format, file_name)

    async def export_json(
        self,
        channel_names: Sequence[str],
        *,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        return await self._export("/channel/exportjson", channel_names, compression_format, file_name)

    async def export_xml(
        self,
        channel_names: Sequence[str],
        *,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        return await self._export("/channel/exportxml", channel_names, compression_format, file_name)

    async def list(self) -> list[Channel]:
        return await self._post("/channel/list", FormParams(), list[Channel]) or []

    async def update(self, name: str, new_name: str) -> str:
        params = FormParams().add("name", name).add("newName", new_name)
        return await self._post("/channel/update", params, str)
