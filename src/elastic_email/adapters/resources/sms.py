"""Recurso `sms`."""

from __future__ import annotations

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource


class SmsResource(ApiResource):
    async def send(self, to: str, body: str) -> None:
        """Envía un SMS; `to` en formato internacional (`+<país><número>`)."""

        await self._post("/sms/send", FormParams().add("to", to).add("body", body))
