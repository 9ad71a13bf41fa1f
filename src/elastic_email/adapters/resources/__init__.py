"""Facades de recursos del API.

Por qué un paquete:
- Un módulo por recurso (`account`, `contact`, `list`...), igual que el API.
- Cada clase hereda de `ApiResource` y solo arma parámetros.
"""

from elastic_email.adapters.resources.account import AccountResource
from elastic_email.adapters.resources.base import ApiResource
from elastic_email.adapters.resources.campaign import CampaignResource
from elastic_email.adapters.resources.channel import ChannelResource
from elastic_email.adapters.resources.contact import ContactResource
from elastic_email.adapters.resources.domain import DomainResource
from elastic_email.adapters.resources.email import EmailResource
from elastic_email.adapters.resources.export import ExportResource
from elastic_email.adapters.resources.file import FileResource
from elastic_email.adapters.resources.lists import ListResource
from elastic_email.adapters.resources.log import LogResource
from elastic_email.adapters.resources.segment import SegmentResource
from elastic_email.adapters.resources.sms import SmsResource
from elastic_email.adapters.resources.survey import SurveyResource
from elastic_email.adapters.resources.template import TemplateResource

__all__ = [
    "AccountResource",
    "ApiResource",
    "CampaignResource",
    "ChannelResource",
    "ContactResource",
    "DomainResource",
    "EmailResource",
    "ExportResource",
    "FileResource",
    "ListResource",
    "LogResource",
    "SegmentResource",
    "SmsResource",
    "SurveyResource",
    "TemplateResource",
]
