"""Cliente asíncrono para el API v2 de Elastic Email."""

from elastic_email.client import ElasticEmailClient
from elastic_email.core.config import ClientSettings
from elastic_email.core.domain.models import FilePayload
from elastic_email.core.errors import (
    ApiError,
    DecodeError,
    ElasticEmailError,
    NotFoundError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientSettings",
    "DecodeError",
    "ElasticEmailClient",
    "ElasticEmailError",
    "FilePayload",
    "NotFoundError",
    "TransportError",
]
