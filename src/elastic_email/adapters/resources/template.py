"""Recurso `template`: plantillas HTML/texto de email."""

from __future__ import annotations

from collections.abc import Sequence

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import TemplateScope, TemplateType
from elastic_email.core.domain.models import Template, TemplateList


class TemplateResource(ApiResource):
    async def add(
        self,
        name: str,
        subject: str,
        from_email: str,
        from_name: str,
        *,
        template_type: TemplateType | None = None,
        template_scope: TemplateScope | None = None,
        body_html: str | None = None,
        body_text: str | None = None,
        css: str | None = None,
        original_template_id: int | None = None,
    ) -> int:
        params = (
            FormParams()
            .add("name", name)
            .add("subject", subject)
            .add("fromEmail", from_email)
            .add("fromName", from_name)
            .add("templateType", template_type)
            .add("templateScope", template_scope)
            .add("bodyHtml", body_html)
            .add("bodyText", body_text)
            .add("css", css)
            .add("originalTemplateID", original_template_id)
        )
        return await self._post("/template/add", params, int)

    async def check_usage(
        self,
        *,
        names: Sequence[str] | None = None,
        template_ids: Sequence[int] | None = None,
    ) -> bool:
        params = FormParams().add_list("names", names).add_list("templateIDs", template_ids)
        return await self._post("/template/checkusage", params, bool)

    async def copy(
        self,
        template_id: int,
        name: str,
        subject: str,
        from_email: str,
        from_name: str,
    ) -> Template:
        params = (
            FormParams()
            .add("templateID", template_id)
            .add("name", name)
            .add("subject", subject)
            .add("fromEmail", from_email)
            .add("fromName", from_name)
        )
        return await self._post("/template/copy", params, Template)

    async def delete(self, template_id: int) -> None:
        await self._post("/template/delete", FormParams().add("templateID", template_id))

    async def delete_bulk(self, template_ids: Sequence[int]) -> None:
        await self._post("/template/deletebulk", FormParams().add_list("templateIDs", template_ids))

    async def get_embedded_html(self, template_id: int) -> str:
        params = FormParams().add("templateID", template_id)
        return await self._post("/template/getembeddedhtml", params, str)

    async def get_list(self, *, limit: int | None = None, offset: int | None = None) -> TemplateList:
        params = FormParams().add("limit", limit).add("offset", offset)
        return await self._post("/template/getlist", params, TemplateList)

    async def is_used_by_campaign(self, template_id: int) -> bool:
        params = FormParams().add("templateID", template_id)
        return await self._post("/template/isusedbycampaign", params, bool)

    async def load_template(self, template_id: int) -> Template:
        params = FormParams().add("templateID", template_id)
        return await self._post("/template/loadtemplate", params, Template)

    async def remove_screenshot(self, template_id: int) -> None:
        await self._post("/template/removescreenshot", FormParams().add("templateID", template_id))

    async def set_default(self, template_id: int) -> None:
        await self._post("/template/setdefault", FormParams().add("templateID", template_id))

    async def update(
        self,
        template_id: int,
        *,
        template_scope: TemplateScope | None = None,
        name: str | None = None,
        subject: str | None = None,
        from_email: str | None = None,
        from_name: str | None = None,
        body_html: str | None = None,
        body_text: str | None = None,
        css: str | None = None,
        remove_screenshot: bool | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("templateID", template_id)
            .add("templateScope", template_scope)
            .add("name", name)
            .add("subject", subject)
            .add("fromEmail", from_email)
            .add("fromName", from_name)
            .add("bodyHtml", body_html)
            .add("bodyText", body_text)
            .add("css", css)
            .add("removeScreenshot", remove_screenshot)
        )
        await self._post("/template/update", params)
