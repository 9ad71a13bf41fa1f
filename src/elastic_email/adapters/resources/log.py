"""Recurso `log`: eventos de entrega, exports y tracking de enlaces."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import (
    CompressionFormat,
    ExportFileFormats,
    IntervalType,
    LogJobStatus,
    MessageCategory,
)
from elastic_email.core.domain.models import ExportLink, LinkTrackingDetails, Log, LogSummary


class LogResource(ApiResource):
    async def cancel_in_progress(
        self,
        *,
        channel_name: str | None = None,
        transaction_id: str | None = None,
    ) -> None:
        params = FormParams().add("channelName", channel_name).add("transactionID", transaction_id)
        await self._post("/log/cancelinprogress", params)

    async def export(
        self,
        statuses: Sequence[LogJobStatus],
        *,
        file_format: ExportFileFormats | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        channel_name: str | None = None,
        include_email: bool | None = None,
        include_sms: bool | None = None,
        message_categories: Sequence[MessageCategory] | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
        email: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add_list("statuses", statuses)
            .add("fileFormat", file_format)
            .add("from", from_date)
            .add("to", to_date)
            .add("channelName", channel_name)
            .add("includeEmail", include_email)
            .add("includeSms", include_sms)
            .add_list("messageCategory", message_categories)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
            .add("email", email)
        )
        return await self._post("/log/export", params, ExportLink)

    async def export_link_tracking(
        self,
        *,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        channel_name: str | None = None,
        file_format: ExportFileFormats | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add("from", from_date)
            .add("to", to_date)
            .add("channelName", channel_name)
            .add("fileFormat", file_format)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post("/log/exportlinktracking", params, ExportLink)

    async def link_tracking(
        self,
        *,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        limit: int | None = None,
        offset: int | None = None,
        channel_name: str | None = None,
    ) -> LinkTrackingDetails:
        params = (
            FormParams()
            .add("from", from_date)
            .add("to", to_date)
            .add("limit", limit)
            .add("offset", offset)
            .add("channelName", channel_name)
        )
        return await self._post("/log/linktracking", params, LinkTrackingDetails)

    async def load(
        self,
        statuses: Sequence[LogJobStatus],
        *,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        channel_name: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        include_email: bool | None = None,
        include_sms: bool | None = None,
        message_categories: Sequence[MessageCategory] | None = None,
        email: str | None = None,
        use_status_change_date: bool | None = None,
    ) -> Log:
        params = (
            FormParams()
            .add_list("statuses", statuses)
            .add("from", from_date)
            .add("to", to_date)
            .add("channelName", channel_name)
            .add("limit", limit)
            .add("offset", offset)
            .add("includeEmail", include_email)
            .add("includeSms", include_sms)
            .add_list("messageCategory", message_categories)
            .add("email", email)
            .add("useStatusChangeDate", use_status_change_date)
        )
        return await self._post("/log/load", params, Log)

    async def retry_now(self, msg_id: str) -> None:
        await self._post("/log/retrynow", FormParams().add("msgID", msg_id))

    async def summary(
        self,
        from_date: datetime,
        to_date: datetime,
        *,
        channel_name: str | None = None,
        interval: IntervalType | None = None,
        transaction_id: str | None = None,
    ) -> LogSummary:
        params = (
            FormParams()
            .add("from", from_date)
            .add("to", to_date)
            .add("channelName", channel_name)
            .add("interval", interval)
            .add("transactionID", transaction_id)
        )
        return await self._post("/log/summary", params, LogSummary)
