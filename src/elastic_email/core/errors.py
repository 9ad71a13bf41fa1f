"""Taxonomía de errores del cliente.

Por qué cuatro tipos distintos:
- `ApiError`: el servicio respondió `success=false` (el servidor dice "no").
- `DecodeError`: no pudimos entender la respuesta (JSON roto o forma inesperada).
- `TransportError`: fallo HTTP (status no 2xx) o de red antes de tener body.
- `NotFoundError`: descarga sin contenido para el identificador pedido.

Todos heredan de `ElasticEmailError` para que el caller pueda capturar en bloque.
"""

from __future__ import annotations

from collections.abc import Mapping


class ElasticEmailError(Exception):
    """Base de todos los errores del cliente."""


class ApiError(ElasticEmailError):
    """El servicio reportó `success=false`; `message` es el texto del servidor."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(ElasticEmailError):
    """El body no es JSON válido o no encaja con el envelope/tipo esperado."""

    def __init__(self, message: str, *, body: bytes | str | None = None) -> None:
        super().__init__(message)
        self.body = body


class TransportError(ElasticEmailError):
    """Status HTTP no 2xx (o fallo de red, con `status_code=None`).

    El mensaje es la descripción de status que envía el servidor cuando existe,
    no una frase genérica: conserva el diagnóstico original.
    """

    def __init__(
        self,
        reason: str,
        *,
        status_code: int | None = None,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers or {})


class NotFoundError(ElasticEmailError):
    """La descarga devolvió 2xx con body vacío: no hay fichero disponible."""
