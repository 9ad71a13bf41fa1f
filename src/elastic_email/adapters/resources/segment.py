"""Recurso `segment`: listas dinámicas definidas por una regla."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import CompressionFormat, ExportFileFormats
from elastic_email.core.domain.models import ExportLink, Segment


class SegmentResource(ApiResource):
    async def add(self, segment_name: str, rule: str) -> Segment:
        params = FormParams().add("segmentName", segment_name).add("rule", rule)
        return await self._post("/segment/add", params, Segment)

    async def copy(
        self,
        source_segment_name: str,
        *,
        new_segment_name: str | None = None,
        rule: str | None = None,
    ) -> Segment:
        params = (
            FormParams()
            .add("sourceSegmentName", source_segment_name)
            .add("newSegmentName", new_segment_name)
            .add("rule", rule)
        )
        return await self._post("/segment/copy", params, Segment)

    async def delete(self, segment_name: str) -> None:
        await self._post("/segment/delete", FormParams().add("segmentName", segment_name))

    async def export(
        self,
        segment_name: str,
        *,
        file_format: ExportFileFormats | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add("segmentName", segment_name)
            .add("fileFormat", file_format)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post("/segment/export", params, ExportLink)

    async def list(
        self,
        *,
        include_history: bool | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[Segment]:
        params = (
            FormParams()
            .add("includeHistory", include_history)
            .add("from", from_date)
            .add("to", to_date)
        )
        return await self._post("/segment/list", params, list[Segment]) or []

    async def load_by_name(
        self,
        segment_names: Sequence[str],
        *,
        include_history: bool | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[Segment]:
        params = (
            FormParams()
            .add_list("segmentNames", segment_names)
            .add("includeHistory", include_history)
            .add("from", from_date)
            .add("to", to_date)
        )
        return await self._post("/segment/loadbyname", params, list[Segment]) or []

    async def update(
        self,
        segment_name: str,
        *,
        new_segment_name: str | None = None,
        rule: str | None = None,
    ) -> Segment:
        params = (
            FormParams()
            .add("segmentName", segment_name)
            .add("newSegmentName", new_segment_name)
            .add("rule", rule)
        )
        return await self._post("/segment/update", params, Segment)
