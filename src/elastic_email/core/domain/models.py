"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las respuestas del API son JSON con nombres PascalCase (`PublicAccountID`,
  `TemplateID`...). Un alias generator único evita repetir alias a mano.
- Los modelos aceptan tanto el nombre del wire como el snake_case y ignoran
  campos desconocidos: el servicio añade campos sin versionar el API.

Nota:
- Estos modelos describen *qué* devuelve el servicio, no *cómo* se obtiene.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from elastic_email.core.domain.enums import (
    AccountStatus,
    CampaignStatus,
    CampaignTriggerType,
    CertificateValidationStatus,
    ContactSource,
    ContactStatus,
    ExportFileFormats,
    ExportStatus,
    ExportType,
    LogEventStatus,
    MessageCategory,
    SurveyStatus,
    TemplateScope,
    TemplateType,
    TrackingType,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "Account",
    "AccountOverview",
    "AdvancedOptions",
    "ApiEnvelope",
    "ApiModel",
    "BlockedContact",
    "Campaign",
    "CampaignChannel",
    "CampaignTemplate",
    "Channel",
    "Contact",
    "ContactHistory",
    "ContactList",
    "ContactStatusCounts",
    "DomainDetail",
    "EmailJobFailedStatus",
    "EmailJobStatus",
    "EmailSend",
    "EmailStatus",
    "EmailView",
    "Export",
    "ExportLink",
    "FileInfo",
    "FilePayload",
    "LinkTrackingDetails",
    "Log",
    "LogSummary",
    "Payment",
    "Profile",
    "Recipient",
    "ReputationDetail",
    "Segment",
    "SegmentHistory",
    "SubAccount",
    "Survey",
    "SurveyResultInfo",
    "SurveyResultsSummaryInfo",
    "SurveyStep",
    "Template",
    "TemplateList",
    "TrackedLink",
]

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _wire_name(field_name: str) -> str:
    """`public_account_id` -> `PublicAccountID` (convención del API v2)."""

    parts = field_name.split("_")
    return "".join("ID" if part == "id" else part[:1].upper() + part[1:] for part in parts)


class ApiModel(BaseModel):
    """Base de todas las entidades devueltas por el API."""

    model_config = ConfigDict(
        alias_generator=_wire_name,
        populate_by_name=True,
        extra="ignore",
    )


class ApiEnvelope(BaseModel):
    """Envoltorio `{success, error, data}` de toda respuesta no-fichero.

    Invariante: si `success` es False, `error` trae el mensaje y `data` se
    considera ausente.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool = Field(..., description="Resultado lógico de la operación.")
    error: str | None = Field(default=None, description="Mensaje del servidor si falló.")
    data: Any = Field(default=None, description="Payload específico de la operación.")


@dataclass(frozen=True)
class FilePayload:
    """Fichero subido o descargado.

    - En uploads `content_type` es opcional (se envía `application/octet-stream`).
    - En descargas los tres campos vienen de la respuesta.
    """

    content: bytes
    file_name: str
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path | str, *, content_type: str | None = None) -> "FilePayload":
        path = Path(path)
        guessed = content_type or mimetypes.guess_type(path.name)[0]
        return cls(content=path.read_bytes(), file_name=path.name, content_type=guessed)

    def effective_content_type(self) -> str:
        return self.content_type or DEFAULT_CONTENT_TYPE

    def save(self, directory: Path | str) -> Path:
        """Escribe el contenido en `directory/<file_name>` y devuelve la ruta.

        Solo se usa el último segmento del nombre; si queda vacío, `.` o `..`
        se lanza `ValueError` en vez de escribir fuera de `directory`.
        """

        name = Path(self.file_name).name
        if name in ("", ".", ".."):
            raise ValueError(f"unusable file name: {self.file_name!r}")
        target = Path(directory) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.content)
        return target


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class Account(ApiModel):
    """Cuenta principal asociada a la API key."""

    public_account_id: str | None = Field(
        default=None,
        description="Identificador público de la cuenta.",
    )
    api_key: str | None = Field(default=None, description="API key principal.")
    email: str | None = Field(default=None, description="Email de login de la cuenta.")
    status: AccountStatus | None = Field(default=None, description="Estado de la cuenta.")
    credit: Decimal | None = Field(default=None, description="Crédito disponible.")
    reputation: float | None = Field(default=None, description="Reputación (0..100).")
    date_created: datetime | None = None
    last_activity: datetime | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    is_sub_account: bool | None = None
    requires_email_credits: bool | None = None
    daily_send_limit: int | None = None
    total_emails_sent: int | None = None
    max_contacts: int | None = None
    contacts_count: int | None = None


class AccountOverview(ApiModel):
    total_emails_sent: int = 0
    credit: Decimal | None = None
    cost_per_thousand: Decimal | None = None
    in_progress_count: int = 0
    blocked_contacts_count: int = 0
    reputation: float | None = None
    contact_count: int = 0
    campaign_count: int = 0
    template_count: int = 0
    sub_account_count: int = 0
    referral_count: int = 0


class SubAccount(ApiModel):
    public_account_id: str | None = None
    api_key: str | None = None
    email: str | None = None
    account_id: int | None = None
    status: AccountStatus | None = None
    reputation: float | None = None
    date_created: datetime | None = None
    last_activity: datetime | None = None
    email_credits: int | None = None
    requires_email_credits: bool | None = None
    daily_send_limit: int | None = None
    total_emails_sent: int | None = None


class Profile(ApiModel):
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    website: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country_id: int | None = None
    phone: str | None = None
    email: str | None = None


class AdvancedOptions(ApiModel):
    enable_clicks_tracking: bool | None = None
    enable_link_click_tracking: bool | None = None
    manage_subscriptions: bool | None = None
    manage_subscribed_only: bool | None = None
    transactional_on_unsubscribe: bool | None = None
    skip_list_unsubscribe: bool | None = None
    auto_text_from_html: bool | None = None
    allow_custom_headers: bool | None = None
    bcc_email: str | None = None
    content_transfer_encoding: str | None = None
    email_notification_for_error: bool | None = None
    email_notification_email: str | None = None
    webhook_notification_url: str | None = None
    notify_once_per_email: bool | None = None
    enable_ui_notifications: bool | None = None
    logo_url: str | None = None
    enable_template_scripting: bool | None = None
    static_ip_address: str | None = Field(default=None, alias="StaticIPAddress")
    tracking_domain: str | None = None
    default_template_id: int | None = None


class Payment(ApiModel):
    date: datetime | None = None
    amount: Decimal | None = None
    payment_type: str | None = None
    comment: str | None = None


class ReputationDetail(ApiModel):
    impact: dict[str, float] = Field(default_factory=dict)
    abuse_percent: float | None = None
    unknown_users_percent: float | None = None
    average_spam_score: float | None = None
    failed_spam_filter_percent: float | None = None
    setup_score: float | None = None
    reputation_history: list[dict[str, Any]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Campaign / Channel
# ---------------------------------------------------------------------------


class CampaignTemplate(ApiModel):
    """Plantilla asociada a un campaign (un campaign puede tener varias para A/X)."""

    template_id: int | None = None
    subject: str | None = None
    from_email: str | None = None
    from_name: str | None = None
    reply_to_email: str | None = None
    reply_to_name: str | None = None
    body_html: str | None = None
    body_text: str | None = None
    utm_source: str | None = None
    utm_medium: str | None = None
    utm_campaign: str | None = None
    utm_content: str | None = None


class Campaign(ApiModel):
    """Definición de campaign enviada como JSON en `campaign/add` y `campaign/update`."""

    channel_id: int | None = Field(default=None, description="Identificador del canal/campaign.")
    name: str = Field(..., min_length=1, description="Nombre único del campaign.")
    status: CampaignStatus = Field(default=CampaignStatus.Draft)
    recipient_list_names: list[str] = Field(default_factory=list)
    segment_names: list[str] = Field(default_factory=list)
    is_recipients_campaign: bool | None = None
    template_id: int | None = None
    campaign_templates: list[CampaignTemplate] = Field(default_factory=list)
    trigger_type: CampaignTriggerType | None = None
    trigger_date: datetime | None = None
    trigger_delay: float | None = None
    trigger_frequency: float | None = None
    trigger_count: int | None = None
    trigger_channel_id: int | None = None
    trigger_data: str | None = None
    split_option: int | None = None
    split_exclude_abuse: bool | None = None
    time_zone: str | None = None


class CampaignChannel(ApiModel):
    channel_id: int | None = None
    name: str | None = None
    is_campaign: bool | None = None
    status: CampaignStatus | None = None
    client_id: int | None = None
    date_added: datetime | None = None
    last_activity: datetime | None = None
    last_processed: datetime | None = None
    parent_channel_name: str | None = None
    template_channels: list[Any] = Field(default_factory=list)
    recipient_count: int | None = None
    sent_count: int = 0
    delivered_count: int = 0
    clicked_count: int = 0
    opened_count: int = 0
    unsubscribed_count: int = 0
    failed_abuse: int = 0
    template_id: int | None = None
    template_subject: str | None = None


class Channel(ApiModel):
    name: str | None = None
    date_added: datetime | None = None
    last_activity: datetime | None = None
    total_sent: int = 0
    total_opened: int = 0
    total_clicked: int = 0
    total_bounced: int = 0
    total_unsubscribed: int = 0
    total_complaints: int = 0


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


class Contact(ApiModel):
    """Contacto con sus contadores de actividad y campos personalizados."""

    email: str = Field(..., min_length=3, description="Email del contacto.")
    first_name: str | None = None
    last_name: str | None = None
    status: ContactStatus | None = Field(default=None, description="Estado de suscripción.")
    source: ContactSource | None = None
    date_added: datetime | None = None
    date_updated: datetime | None = None
    status_change_date: datetime | None = None
    consent_date: datetime | None = None
    consent_ip: str | None = Field(default=None, alias="ConsentIP")
    created_from_ip: str | None = Field(default=None, alias="CreatedFromIP")
    total_sent: int = 0
    total_opened: int = 0
    total_clicked: int = 0
    total_failed: int = 0
    last_opened: datetime | None = None
    last_clicked: datetime | None = None
    bounced_error_code: int | None = None
    bounced_error: str | None = None
    custom_fields: dict[str, str] = Field(
        default_factory=dict,
        description="Campos personalizados (`field_<nombre>` al enviarlos).",
    )


class ContactStatusCounts(ApiModel):
    transactional: int = 0
    engaged: int = 0
    active: int = 0
    bounced: int = 0
    unsubscribed: int = 0
    abuse: int = 0
    inactive: int = 0
    stale: int = 0
    not_confirmed: int = 0


class ContactHistory(ApiModel):
    contact_history_id: int | None = None
    event_type: str | None = None
    event_type_value: int | None = None
    event_date: datetime | None = None
    channel_name: str | None = None
    template_name: str | None = None
    ip_address: str | None = Field(default=None, alias="IPAddress")
    country: str | None = None
    data: str | None = None


class BlockedContact(ApiModel):
    email: str
    status: str | None = None
    friendly_error_message: str | None = None
    date_updated: datetime | None = None


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------


class DomainDetail(ApiModel):
    domain: str
    default_domain: bool | None = None
    spf: bool | None = None
    dkim: bool | None = None
    mx: bool | None = Field(default=None, alias="MX")
    dmarc: bool | None = Field(default=None, alias="DMARC")
    is_rewrite_domain_valid: bool | None = None
    verify: bool | None = None
    type: TrackingType | None = None
    tracking_type_user_request: TrackingType | None = None
    certificate_status: CertificateValidationStatus | None = None


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------


class EmailSend(ApiModel):
    """Resultado de `email/send`."""

    transaction_id: str | None = Field(default=None, description="ID del lote de envío.")
    message_id: str | None = Field(default=None, description="ID del primer mensaje.")


class EmailStatus(ApiModel):
    to: str | None = None
    from_: str | None = Field(default=None, alias="From")
    date: datetime | None = None
    status: LogEventStatus | None = None
    status_name: str | None = None
    status_change_date: datetime | None = None
    error_message: str | None = None
    transaction_id: str | None = None


class EmailView(ApiModel):
    body: str | None = None
    subject: str | None = None
    from_: str | None = Field(default=None, alias="From")


class EmailJobFailedStatus(ApiModel):
    address: str | None = None
    error: str | None = None
    error_code: int | None = None
    category: str | None = None


class EmailJobStatus(ApiModel):
    id: str | None = Field(default=None, alias="ID")
    status: str | None = None
    recipients_count: int = 0
    failed: list[EmailJobFailedStatus] = Field(default_factory=list)
    failed_count: int = 0
    sent: list[str] = Field(default_factory=list)
    sent_count: int = 0
    delivered: list[str] = Field(default_factory=list)
    delivered_count: int = 0
    pending: list[str] = Field(default_factory=list)
    pending_count: int = 0
    opened: list[str] = Field(default_factory=list)
    opened_count: int = 0
    clicked: list[str] = Field(default_factory=list)
    clicked_count: int = 0
    unsubscribed: list[str] = Field(default_factory=list)
    unsubscribed_count: int = 0
    abuse_reports: list[str] = Field(default_factory=list)
    abuse_reports_count: int = 0
    message_ids: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Export / File
# ---------------------------------------------------------------------------


class ExportLink(ApiModel):
    """Enlace de descarga de un export asíncrono."""

    link: str | None = Field(default=None, description="URL de descarga.")
    public_export_id: str | None = None


class Export(ApiModel):
    public_export_id: str | None = None
    date_added: datetime | None = None
    type: ExportType | None = None
    status: ExportStatus | None = None
    info: str | None = None
    filename: str | None = None
    link: str | None = None
    file_format: ExportFileFormats | None = None


class FileInfo(ApiModel):
    file_name: str | None = None
    size: int | None = None
    date_added: datetime | None = None
    expiration_date: datetime | None = None
    content_type: str | None = None


# ---------------------------------------------------------------------------
# List / Segment
# ---------------------------------------------------------------------------


class ContactList(ApiModel):
    """Lista de contactos (`List` en el API; renombrado para no sombrear `list`)."""

    list_id: int | None = None
    public_list_id: str | None = None
    list_name: str = Field(..., min_length=1)
    count: int = 0
    date_added: datetime | None = None
    allow_unsubscribe: bool | None = None
    rule: str | None = None


class SegmentHistory(ApiModel):
    segment_history_id: int | None = None
    segment_id: int | None = None
    day: int | None = None
    count: int = 0
    engaged_count: int = 0
    active_count: int = 0
    bounced_count: int = 0
    unsubscribed_count: int = 0
    abuse_count: int = 0


class Segment(ApiModel):
    segment_id: int | None = None
    name: str = Field(..., min_length=1)
    rule: str | None = None
    last_count: int = 0
    history: list[SegmentHistory] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Log
# ---------------------------------------------------------------------------


class Recipient(ApiModel):
    is_sms: bool | None = None
    transaction_id: str | None = None
    to: str | None = None
    from_: str | None = Field(default=None, alias="FromEmail")
    date: datetime | None = None
    status: str | None = None
    status_change_date: datetime | None = None
    channel: str | None = None
    message_id: str | None = None
    message_category: MessageCategory | None = None
    next_try_on: datetime | None = None
    subject: str | None = None
    message: str | None = None
    opened_date: datetime | None = None
    clicked_date: datetime | None = None


class Log(ApiModel):
    status: str | None = None
    recipients_count: int = 0
    recipients: list[Recipient] = Field(default_factory=list)


class LogSummary(ApiModel):
    log_status_summary: dict[str, Any] = Field(default_factory=dict)
    email_log_status_summary: list[dict[str, Any]] = Field(default_factory=list)
    daily_log_status_summary: list[dict[str, Any]] = Field(default_factory=list)
    sub_log_summary: list[dict[str, Any]] = Field(default_factory=list)


class TrackedLink(ApiModel):
    link: str | None = None
    clicks: str | None = None
    percent: str | None = None


class LinkTrackingDetails(ApiModel):
    tracked_link: list[TrackedLink] = Field(default_factory=list)
    total_clicks_count: int = 0
    more_links_count: int = 0


# ---------------------------------------------------------------------------
# Survey
# ---------------------------------------------------------------------------


class SurveyStep(ApiModel):
    survey_step_id: int | None = None
    survey_step_type: int | None = None
    question: str | None = None
    description: str | None = None
    sequence: int | None = None
    survey_step_answers: list[dict[str, Any]] = Field(default_factory=list)


class Survey(ApiModel):
    """Encuesta; se envía serializada como JSON en `survey/add` y `survey/update`."""

    public_survey_id: str | None = None
    name: str = Field(..., min_length=1)
    status: SurveyStatus = Field(default=SurveyStatus.Draft)
    date_created: datetime | None = None
    date_updated: datetime | None = None
    expiry_date: datetime | None = None
    link: str | None = None
    result_count: int = 0
    survey_steps: list[SurveyStep] = Field(default_factory=list)


class SurveyResultInfo(ApiModel):
    survey_result_id: str | None = None
    created_from_ip: str | None = Field(default=None, alias="CreatedFromIP")
    date_updated: datetime | None = None
    date_completed: datetime | None = None
    survey_result_answers: list[dict[str, Any]] = Field(default_factory=list)


class SurveyResultsSummaryInfo(ApiModel):
    survey_results_summary: dict[str, Any] = Field(default_factory=dict)
    survey_step_answer_summary: dict[str, Any] = Field(default_factory=dict)
    answer_summary: dict[str, Any] = Field(default_factory=dict)
    total_count: int = 0


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------


class Template(ApiModel):
    """Plantilla de email."""

    template_id: int | None = Field(default=None, description="ID numérico de la plantilla.")
    template_type: TemplateType | None = None
    name: str | None = None
    date_added: datetime | None = None
    css: str | None = None
    subject: str | None = None
    from_email: str | None = None
    from_name: str | None = None
    body_html: str | None = None
    body_text: str | None = None
    original_template_id: int | None = None
    original_template_name: str | None = None
    template_scope: TemplateScope | None = None
    tags: list[str] = Field(default_factory=list)


class TemplateList(ApiModel):
    templates: list[Template] = Field(default_factory=list)
    templates_count: int = 0
    drafts_templates: list[Template] = Field(default_factory=list)
    drafts_templates_count: int = 0
