"""Recurso `campaign`."""

from __future__ import annotations

from collections.abc import Sequence

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import CompressionFormat, ExportFileFormats
from elastic_email.core.domain.models import Campaign, CampaignChannel, ExportLink


class CampaignResource(ApiResource):
    async def add(self, campaign: Campaign) -> int:
        """Crea el campaign (enviado como JSON) y devuelve su `ChannelID`."""

        params = FormParams().add_json("campaign", campaign)
        return await self._post("/campaign/add", params, int)

    async def copy(self, channel_id: int, *, new_campaign_name: str | None = None) -> int:
        params = FormParams().add("channelID", channel_id).add("newCampaignName", new_campaign_name)
        return await self._post("/campaign/copy", params, int)

    async def delete(self, channel_id: int) -> None:
        await self._post("/campaign/delete", FormParams().add("channelID", channel_id))

    async def export(
        self,
        *,
        channel_ids: Sequence[int] | None = None,
        file_format: ExportFileFormats | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add_list("channelIDs", channel_ids)
            .add("fileFormat", file_format)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post("/campaign/export", params, ExportLink)

    async def list(
        self,
        *,
        search: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[CampaignChannel]:
        params = FormParams().add("search", search).add("offset", offset).add("limit", limit)
        return await self._post("/campaign/list", params, list[CampaignChannel]) or []

    async def pause(self, channel_id: int) -> None:
        await self._post("/campaign/pause", FormParams().add("channelID", channel_id))

    async def update(self, campaign: Campaign) -> int:
        params = FormParams().add_json("campaign", campaign)
        return await self._post("/campaign/update", params, int)
