"""Cliente principal.

Por qué una instancia y no configuración global:
- Cada `ElasticEmailClient` es dueño de su `ClientSettings` (inmutable) y de
  su `httpx.AsyncClient` durante toda su vida.
- Varias instancias (p.ej. cuenta principal y sub-cuentas) conviven sin
  pisarse la API key.

Uso:

    async with ElasticEmailClient(api_key="...") as client:
        account = await client.account.load()
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from elastic_email.adapters.http_client import build_async_client
from elastic_email.adapters.resources import (
    AccountResource,
    CampaignResource,
    ChannelResource,
    ContactResource,
    DomainResource,
    EmailResource,
    ExportResource,
    FileResource,
    ListResource,
    LogResource,
    SegmentResource,
    SmsResource,
    SurveyResource,
    TemplateResource,
)
from elastic_email.adapters.transport import HttpTransport
from elastic_email.core.config import ClientSettings

logger = logging.getLogger(__name__)


class ElasticEmailClient:
    """Punto de entrada: un atributo por recurso del API."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or ClientSettings()
        overrides = {k: v for k, v in {"api_key": api_key, "base_url": base_url}.items() if v is not None}
        if overrides:
            settings = settings.model_copy(update=overrides)
        self._settings = settings

        # Si el caller inyecta el cliente httpx, el ciclo de vida es suyo.
        self._owns_http_client = http_client is None
        self._http_client = http_client or build_async_client(settings, transport=transport)
        self._transport = HttpTransport(self._http_client, api_key=settings.api_key)

        if not settings.api_key:
            logger.warning("ElasticEmailClient created without an API key; requests will be rejected")

        self.account = AccountResource(self._transport)
        self.campaign = CampaignResource(self._transport)
        self.channel = ChannelResource(self._transport)
        self.contact = ContactResource(self._transport)
        self.domain = DomainResource(self._transport)
        self.email = EmailResource(self._transport)
        self.export = ExportResource(self._transport)
        self.file = FileResource(self._transport)
        self.list = ListResource(self._transport)
        self.log = LogResource(self._transport)
        self.segment = SegmentResource(self._transport)
        self.sms = SmsResource(self._transport)
        self.survey = SurveyResource(self._transport)
        self.template = TemplateResource(self._transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "ElasticEmailClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
