"""Recurso `contact`.

Parámetros con forma especial:
- `publicListID` y `listName` son *repeatable*: una entrada por elemento.
- Los campos personalizados viajan como `field_<nombre>`.
- `upload` sube un CSV por multipart.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import (
    CompressionFormat,
    ContactSource,
    ContactStatus,
    ExportFileFormats,
)
from elastic_email.core.domain.models import (
    BlockedContact,
    Contact,
    ContactHistory,
    ContactList,
    ContactStatusCounts,
    ExportLink,
    FilePayload,
)


class ContactResource(ApiResource):
    async def add(
        self,
        public_account_id: str,
        email: str,
        *,
        public_list_ids: Sequence[str] | None = None,
        list_names: Sequence[str] | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        source: ContactSource | None = None,
        return_url: str | None = None,
        source_url: str | None = None,
        activation_return_url: str | None = None,
        activation_template: str | None = None,
        send_activation: bool | None = None,
        consent_date: datetime | None = None,
        consent_ip: str | None = None,
        fields: Mapping[str, str] | None = None,
        notify_email: str | None = None,
        already_active_url: str | None = None,
    ) -> str:
        """Alta de contacto (pensado para formularios web); devuelve el ID público."""

        params = (
            FormParams()
            .add("publicAccountID", public_account_id)
            .add("email", email)
            .add_list("publicListID", public_list_ids, repeat=True)
            .add_list("listName", list_names, repeat=True)
            .add("firstName", first_name)
            .add("lastName", last_name)
            .add("source", source)
            .add("returnUrl", return_url)
            .add("sourceUrl", source_url)
            .add("activationReturnUrl", activation_return_url)
            .add("activationTemplate", activation_template)
            .add("sendActivation", send_activation)
            .add("consentDate", consent_date)
            .add("consentIP", consent_ip)
            .add_map("field", fields)
            .add("notifyEmail", notify_email)
            .add("alreadyActiveUrl", already_active_url)
        )
        return await self._post("/contact/add", params, str)

    async def add_blocked(self, email: str, status: ContactStatus) -> None:
        params = FormParams().add("email", email).add("status", status)
        await self._post("/contact/addblocked", params)

    async def change_property(self, email: str, name: str, value: str) -> None:
        params = FormParams().add("email", email).add("name", name).add("value", value)
        await self._post("/contact/changeproperty", params)

    async def change_status(
        self,
        status: ContactStatus,
        *,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
    ) -> None:
        params = FormParams().add("status", status).add("rule", rule).add_list("emails", emails)
        await self._post("/contact/changestatus", params)

    async def count_by_status(self, *, rule: str | None = None) -> ContactStatusCounts:
        params = FormParams().add("rule", rule)
        return await self._post("/contact/countbystatus", params, ContactStatusCounts)

    async def delete(
        self,
        *,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
        all_contacts: bool | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("rule", rule)
            .add_list("emails", emails)
            .add("allContacts", all_contacts)
        )
        await self._post("/contact/delete", params)

    async def export(
        self,
        *,
        file_format: ExportFileFormats | None = None,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
        all_contacts: bool | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add("fileFormat", file_format)
            .add("rule", rule)
            .add_list("emails", emails)
            .add("allContacts", all_contacts)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post("/contact/export", params, ExportLink)

    async def find_contact(self, email: str) -> list[ContactList]:
        """Listas a las que pertenece el contacto."""

        params = FormParams().add("email", email)
        return await self._post("/contact/findcontact", params, list[ContactList]) or []

    async def get_contacts_by_list(
        self,
        list_name: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Contact]:
        params = FormParams().add("listName", list_name).add("limit", limit).add("offset", offset)
        return await self._post("/contact/getcontactsbylist", params, list[Contact]) or []

    async def get_contacts_by_segment(
        self,
        segment_name: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Contact]:
        params = FormParams().add("segmentName", segment_name).add("limit", limit).add("offset", offset)
        return await self._post("/contact/getcontactsbysegment", params, list[Contact]) or []

    async def list(
        self,
        *,
        rule: str | None = None,
        all_contacts: bool | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Contact]:
        params = (
            FormParams()
            .add("rule", rule)
            .add("allContacts", all_contacts)
            .add("limit", limit)
            .add("offset", offset)
        )
        return await self._post("/contact/list", params, list[Contact]) or []

    async def load_blocked(
        self,
        statuses: Sequence[ContactStatus],
        *,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[BlockedContact]:
        params = (
            FormParams()
            .add_list("statuses", statuses)
            .add("search", search)
            .add("limit", limit)
            .add("offset", offset)
        )
        return await self._post("/contact/loadblocked", params, list[BlockedContact]) or []

    async def load_history(
        self,
        email: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ContactHistory]:
        params = FormParams().add("email", email).add("limit", limit).add("offset", offset)
        return await self._post("/contact/loadhistory", params, list[ContactHistory]) or []

    async def quick_add(
        self,
        emails: Sequence[str],
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        public_list_ids: Sequence[str] | None = None,
        list_names: Sequence[str] | None = None,
        status: ContactStatus | None = None,
        notes: str | None = None,
        consent_date: datetime | None = None,
        consent_ip: str | None = None,
        fields: Mapping[str, str] | None = None,
        notify_email: str | None = None,
    ) -> None:
        """Alta directa desde la cuenta (sin doble opt-in)."""

        params = (
            FormParams()
            .add_list("emails", emails)
            .add("firstName", first_name)
            .add("lastName", last_name)
            .add_list("publicListID", public_list_ids, repeat=True)
            .add_list("listName", list_names, repeat=True)
            .add("status", status)
            .add("notes", notes)
            .add("consentDate", consent_date)
            .add("consentIP", consent_ip)
            .add_map("field", fields)
            .add("notifyEmail", notify_email)
        )
        await self._post("/contact/quickadd", params)

    async def update(
        self,
        email: str,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        clear_rest_of_fields: bool | None = None,
        fields: Mapping[str, str] | None = None,
        custom_fields: str | None = None,
    ) -> Contact:
        params = (
            FormParams()
            .add("email", email)
            .add("firstName", first_name)
            .add("lastName", last_name)
            .add("clearRestOfFields", clear_rest_of_fields)
            .add_map("field", fields)
            .add("customFields", custom_fields)
        )
        return await self._post("/contact/update", params, Contact)

    async def upload(
        self,
        contact_file: FilePayload,
        *,
        allow_unsubscribe: bool | None = None,
        list_id: int | None = None,
        list_name: str | None = None,
        status: ContactStatus | None = None,
        consent_date: datetime | None = None,
        consent_ip: str | None = None,
    ) -> int:
        """Sube un fichero de contactos; devuelve el número de contactos importados."""

        params = (
            FormParams()
            .add("allowUnsubscribe", allow_unsubscribe)
            .add("listID", list_id)
            .add("listName", list_name)
            .add("status", status)
            .add("consentDate", consent_date)
            .add("consentIP", consent_ip)
        )
        return await self._upload("/contact/upload", [contact_file], params, int)
