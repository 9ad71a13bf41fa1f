"""Recurso `email`: envío transaccional y estado de mensajes.

`send` usa el POST form-encoded normal, salvo que se adjunten ficheros
(`attachment_files`): entonces va por multipart y el envelope se decodifica
a partir del body crudo.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import EncodingType
from elastic_email.core.domain.models import (
    EmailJobStatus,
    EmailSend,
    EmailStatus,
    EmailView,
    FilePayload,
)


class EmailResource(ApiResource):
    async def get_status(
        self,
        transaction_id: str,
        *,
        show_failed: bool | None = None,
        show_sent: bool | None = None,
        show_delivered: bool | None = None,
        show_pending: bool | None = None,
        show_opened: bool | None = None,
        show_clicked: bool | None = None,
        show_abuse: bool | None = None,
        show_unsubscribed: bool | None = None,
        show_errors: bool | None = None,
        show_message_ids: bool | None = None,
    ) -> EmailJobStatus:
        params = (
            FormParams()
            .add("transactionID", transaction_id)
            .add("showFailed", show_failed)
            .add("showSent", show_sent)
            .add("showDelivered", show_delivered)
            .add("showPending", show_pending)
            .add("showOpened", show_opened)
            .add("showClicked", show_clicked)
            .add("showAbuse", show_abuse)
            .add("showUnsubscribed", show_unsubscribed)
            .add("showErrors", show_errors)
            .add("showMessageIDs", show_message_ids)
        )
        return await self._post("/email/getstatus", params, EmailJobStatus)

    async def send(
        self,
        *,
        subject: str | None = None,
        from_email: str | None = None,
        from_name: str | None = None,
        sender: str | None = None,
        sender_name: str | None = None,
        msg_from: str | None = None,
        msg_from_name: str | None = None,
        reply_to: str | None = None,
        reply_to_name: str | None = None,
        to: Sequence[str] | None = None,
        msg_to: Sequence[str] | None = None,
        msg_cc: Sequence[str] | None = None,
        msg_bcc: Sequence[str] | None = None,
        lists: Sequence[str] | None = None,
        segments: Sequence[str] | None = None,
        merge_source_filename: str | None = None,
        channel: str | None = None,
        body_html: str | None = None,
        body_text: str | None = None,
        charset: str | None = None,
        charset_body_html: str | None = None,
        charset_body_text: str | None = None,
        encoding_type: EncodingType | None = None,
        template: str | None = None,
        attachment_files: Sequence[FilePayload] | None = None,
        headers: Mapping[str, str] | None = None,
        post_back: str | None = None,
        merge: Mapping[str, str] | None = None,
        time_off_set_minutes: str | None = None,
        pool_name: str | None = None,
        is_transactional: bool | None = None,
        attachments: Sequence[str] | None = None,
        track_opens: bool | None = None,
        track_clicks: bool | None = None,
        utm_source: str | None = None,
        utm_medium: str | None = None,
        utm_campaign: str | None = None,
        utm_content: str | None = None,
    ) -> EmailSend:
        """Envía un email.

        - `headers` -> `headers_<nombre>`; `merge` -> `merge_<campo>`.
        - `attachments` son IDs de ficheros ya subidos; `attachment_files` se
          suben en la misma request.
        """

        params = (
            FormParams()
            .add("subject", subject)
            .add("from", from_email)
            .add("fromName", from_name)
            .add("sender", sender)
            .add("senderName", sender_name)
            .add("msgFrom", msg_from)
            .add("msgFromName", msg_from_name)
            .add("replyTo", reply_to)
            .add("replyToName", reply_to_name)
            .add_list("to", to)
            .add_list("msgTo", msg_to)
            .add_list("msgCC", msg_cc)
            .add_list("msgBcc", msg_bcc)
            .add_list("lists", lists)
            .add_list("segments", segments)
            .add("mergeSourceFilename", merge_source_filename)
            .add("channel", channel)
            .add("bodyHtml", body_html)
            .add("bodyText", body_text)
            .add("charset", charset)
            .add("charsetBodyHtml", charset_body_html)
            .add("charsetBodyText", charset_body_text)
            .add("encodingType", encoding_type)
            .add("template", template)
            .add_map("headers", headers)
            .add("postBack", post_back)
            .add_map("merge", merge)
            .add("timeOffSetMinutes", time_off_set_minutes)
            .add("poolName", pool_name)
            .add("isTransactional", is_transactional)
            .add_list("attachments", attachments)
            .add("trackOpens", track_opens)
            .add("trackClicks", track_clicks)
            .add("utmSource", utm_source)
            .add("utmMedium", utm_medium)
            .add("utmCampaign", utm_campaign)
            .add("utmContent", utm_content)
        )
        if attachment_files:
            return await self._upload("/email/send", attachment_files, params, EmailSend)
        return await self._post("/email/send", params, EmailSend)

    async def status(self, message_id: str) -> EmailStatus:
        return await self._post("/email/status", FormParams().add("messageID", message_id), EmailStatus)

    async def view(self, message_id: str) -> EmailView:
        return await self._post("/email/view", FormParams().add("messageID", message_id), EmailView)
