"""Recurso `list`: listas estáticas de contactos."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import CompressionFormat, ContactStatus, ExportFileFormats
from elastic_email.core.domain.models import ContactList, ExportLink


class ListResource(ApiResource):
    async def add(
        self,
        list_name: str,
        *,
        create_empty_list: bool | None = None,
        allow_unsubscribe: bool | None = None,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
        all_contacts: bool | None = None,
    ) -> int:
        params = (
            FormParams()
            .add("listName", list_name)
            .add("createEmptyList", create_empty_list)
            .add("allowUnsubscribe", allow_unsubscribe)
            .add("rule", rule)
            .add_list("emails", emails)
            .add("allContacts", all_contacts)
        )
        return await self._post("/list/add", params, int)

    async def add_contacts(
        self,
        list_name: str,
        *,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
        all_contacts: bool | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("listName", list_name)
            .add("rule", rule)
            .add_list("emails", emails)
            .add("allContacts", all_contacts)
        )
        await self._post("/list/addcontacts", params)

    async def copy(
        self,
        source_list_name: str,
        *,
        new_list_name: str | None = None,
        create_empty_list: bool | None = None,
        allow_unsubscribe: bool | None = None,
        rule: str | None = None,
    ) -> int:
        params = (
            FormParams()
            .add("sourceListName", source_list_name)
            .add("newlistName", new_list_name)
            .add("createEmptyList", create_empty_list)
            .add("allowUnsubscribe", allow_unsubscribe)
            .add("rule", rule)
        )
        return await self._post("/list/copy", params, int)

    async def create_from_campaign(
        self,
        campaign_id: int,
        list_name: str,
        *,
        statuses: Sequence[ContactStatus] | None = None,
    ) -> int:
        params = (
            FormParams()
            .add("campaignID", campaign_id)
            .add("listName", list_name)
            .add_list("statuses", statuses)
        )
        return await self._post("/list/createfromcampaign", params, int)

    async def create_nth_selection_lists(
        self,
        list_name: str,
        number_of_lists: int,
        *,
        exclude_blocked: bool | None = None,
        allow_unsubscribe: bool | None = None,
        rule: str | None = None,
        all_contacts: bool | None = None,
    ) -> None:
        """Divide la lista en `number_of_lists` listas (selección cada N-ésimo)."""

        params = (
            FormParams()
            .add("listName", list_name)
            .add("numberOfLists", number_of_lists)
            .add("excludeBlocked", exclude_blocked)
            .add("allowUnsubscribe", allow_unsubscribe)
            .add("rule", rule)
            .add("allContacts", all_contacts)
        )
        await self._post("/list/createnthselectionlists", params)

    async def delete(self, list_name: str) -> None:
        await self._post("/list/delete", FormParams().add("listName", list_name))

    async def export(
        self,
        list_name: str,
        *,
        file_format: ExportFileFormats | None = None,
        compression_format: CompressionFormat | None = None,
        file_name: str | None = None,
    ) -> ExportLink:
        params = (
            FormParams()
            .add("listName", list_name)
            .add("fileFormat", file_format)
            .add("compressionFormat", compression_format)
            .add("fileName", file_name)
        )
        return await self._post("/list/export", params, ExportLink)

    async def list(
        self,
        *,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[ContactList]:
        params = FormParams().add("from", from_date).add("to", to_date)
        return await self._post("/list/list", params, list[ContactList]) or []

    async def load(self, list_name: str) -> ContactList:
        return await self._post("/list/load", FormParams().add("listName", list_name), ContactList)

    async def move_contacts(
        self,
        old_list_name: str,
        new_list_name: str,
        *,
        emails: Sequence[str] | None = None,
        move_all: bool | None = None,
        statuses: Sequence[ContactStatus] | None = None,
        rule: str | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("oldListName", old_list_name)
            .add("newListName", new_list_name)
            .add_list("emails", emails)
            .add("moveAll", move_all)
            .add_list("statuses", statuses)
            .add("rule", rule)
        )
        await self._post("/list/movecontacts", params)

    async def remove_contacts(
        self,
        list_name: str,
        *,
        rule: str | None = None,
        emails: Sequence[str] | None = None,
    ) -> None:
        params = FormParams().add("listName", list_name).add("rule", rule).add_list("emails", emails)
        await self._post("/list/removecontacts", params)

    async def update(
        self,
        list_name: str,
        *,
        new_list_name: str | None = None,
        allow_unsubscribe: bool | None = None,
    ) -> None:
        params = (
            FormParams()
            .add("listName", list_name)
            .add("newListName", new_list_name)
            .add("allowUnsubscribe", allow_unsubscribe)
        )
        await self._post("/list/update", params)
