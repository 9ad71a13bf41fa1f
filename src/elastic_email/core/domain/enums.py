"""Enumeraciones del API.

Los nombres de los miembros son los nombres simbólicos que el servicio espera
en los parámetros (`ContactStatus.Active` se envía como `Active`), por eso no
siguen UPPER_CASE. En las respuestas el servicio puede devolver el entero o el
nombre; `ApiEnum._missing_` acepta ambos.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ApiEnum",
    "api_name",
    "AccountStatus",
    "CampaignStatus",
    "CampaignTriggerType",
    "CertificateValidationStatus",
    "CompressionFormat",
    "ContactSource",
    "ContactStatus",
    "EncodingType",
    "ExportFileFormats",
    "ExportStatus",
    "ExportType",
    "IntervalType",
    "LogEventStatus",
    "LogJobStatus",
    "MessageCategory",
    "SendingPermission",
    "SurveyStatus",
    "TemplateScope",
    "TemplateType",
    "TrackingType",
]


class ApiEnum(IntEnum):
    """Base: entero en el wire de respuesta, nombre simbólico en parámetros."""

    @classmethod
    def _missing_(cls, value: object) -> "ApiEnum | None":
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            lowered = text.lower()
            for member in cls:
                if api_name(member).lower() == lowered:
                    return member
        return None


class AccountStatus(ApiEnum):
    Disabled = -1
    UnConfirmed = 0
    Active = 1


class ContactStatus(ApiEnum):
    Transactional = -2
    Engaged = -1
    Active = 0
    Bounced = 1
    Unsubscribed = 2
    Abuse = 3
    Inactive = 4
    Stale = 5
    NotConfirmed = 6


class ContactSource(ApiEnum):
    DeliveryApi = 0
    ManualInput = 1
    FileUpload = 2
    WebForm = 3
    ContactApi = 4
    VerificationApi = 5
    FileVerification = 6


class CampaignStatus(ApiEnum):
    Deleted = -1
    Active = 0
    Processing = 1
    Sending = 2
    Completed = 3
    Paused = 4
    Cancelled = 5
    Draft = 6


class CampaignTriggerType(ApiEnum):
    SendNow = 1
    FutureScheduled = 2
    OnAdd = 3
    OnOpen = 4
    OnClick = 5


class TemplateType(ApiEnum):
    RawHTML = 0
    DragDropEditor = 1
    LandingPageEditor = 2


class TemplateScope(ApiEnum):
    Private = 0
    Public = 1
    Draft = 2


class ExportFileFormats(ApiEnum):
    Csv = 1
    Xml = 2
    Json = 3


class CompressionFormat(ApiEnum):
    # `None` es palabra reservada: el miembro es `None_` y se envía como `None`.
    None_ = 0
    Zip = 1


class ExportStatus(ApiEnum):
    Error = -1
    Loading = 0
    Ready = 1
    Expired = 2


class ExportType(ApiEnum):
    Log = 1
    Contact = 2
    Campaign = 3
    LinkTracking = 4
    Survey = 5


class LogJobStatus(ApiEnum):
    All = 0
    Ready = 1
    WaitingToRetry = 2
    Sending = 3
    Error = 4
    Sent = 5
    Opened = 6
    Clicked = 7
    Unsubscribed = 8
    AbuseReport = 9


class LogEventStatus(ApiEnum):
    Unknown = 0
    Submitted = 1
    ReadyToSend = 2
    WaitingToRetry = 3
    Sending = 4
    Error = 5
    Sent = 6
    Opened = 7
    Clicked = 8
    Unsubscribed = 9
    AbuseReport = 10


class MessageCategory(ApiEnum):
    Unknown = 0
    Ignore = 1
    Spam = 2
    BlackListed = 3
    NoMailbox = 4
    GreyListed = 5
    Throttled = 6
    Timeout = 7
    ConnectionProblem = 8
    SPFProblem = 9
    AccountProblem = 10
    DNSProblem = 11
    NotDeliveredCancelled = 12
    CodeError = 13
    ManualCancel = 14
    ConnectionTerminated = 15
    NotDelivered = 16


class EncodingType(ApiEnum):
    UserProvided = -1
    None_ = 0
    Raw7bit = 1
    Raw8bit = 2
    QuotedPrintable = 3
    Base64 = 4
    Uue = 5


class IntervalType(ApiEnum):
    Summary = 0
    Hourly = 1


class TrackingType(ApiEnum):
    None_ = -2
    Delete = -1
    Http = 0
    ExternalHttps = 1
    InternalCertHttps = 2
    LetsEncryptCert = 3


class CertificateValidationStatus(ApiEnum):
    ErrorOccured = -2
    CertNotSet = 0
    Valid = 1
    NotValid = 2


class SurveyStatus(ApiEnum):
    Deleted = -1
    Expired = 0
    Active = 1
    Draft = 2


class SendingPermission(ApiEnum):
    None_ = 0
    Smtp = 1
    HttpApi = 2
    SmtpAndHttpApi = 3
    Interface = 4
    SmtpAndInterface = 5
    HttpApiAndInterface = 6
    UseAccountSetting = 7
    All = 255


def api_name(member: ApiEnum) -> str:
    """Nombre simbólico que espera el API (`None_` se envía como `None`)."""

    return member.name.rstrip("_")
