"""Recurso `domain`: dominios de envío y tracking."""

from __future__ import annotations

from elastic_email.adapters.form_encoder import FormParams
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.core.domain.enums import TrackingType
from elastic_email.core.domain.models import DomainDetail


class DomainResource(ApiResource):
    async def add(self, domain: str, *, tracking_type: TrackingType | None = None) -> None:
        params = FormParams().add("domain", domain).add("trackingType", tracking_type)
        await self._post("/domain/add", params)

    async def delete(self, domain: str) -> None:
        await self._post("/domain/delete", FormParams().add("domain", domain))

    async def list(self) -> list[DomainDetail]:
        return await self._post("/domain/list", FormParams(), list[DomainDetail]) or []

    async def set_default(self, domain: str) -> None:
        await self._post("/domain/setdefault", FormParams().add("domain", domain))

    async def verify_dkim(self, domain: str) -> str:
        return await self._post("/domain/verifydkim", FormParams().add("domain", domain), str)

    async def verify_mx(self, domain: str) -> str:
        return await self._post("/domain/verifymx", FormParams().add("domain", domain), str)

    async def verify_spf(self, domain: str) -> str:
        return await self._post("/domain/verifyspf", FormParams().add("domain", domain), str)

    async def verify_tracking(self, domain: str, *, tracking_type: TrackingType | None = None) -> str:
        params = FormParams().add("domain", domain).add("trackingType", tracking_type)
        return await self._post("/domain/verifytracking", params, str)
