"""Contrato del transporte HTTP.

Por qué Protocol:
- Los facades (`account`, `contact`, ...) solo necesitan tres operaciones.
- Permite sustituir el transporte por un stub en tests sin herencia rígida.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from elastic_email.core.domain.models import FilePayload


@runtime_checkable
class ApiTransport(Protocol):
    """Contrato mínimo que consumen los facades.

    Reglas de diseño:
    - Todas las operaciones son asíncronas: un round trip por llamada.
    - `params` es una secuencia ordenada de pares `(clave, valor)` ya
      stringificados; la misma clave puede repetirse.
    """

    async def post(self, path: str, params: Sequence[tuple[str, str]], result_type: Any = None) -> Any:
        """POST form-encoded; devuelve `data` del envelope validado contra `result_type`."""

        ...

    async def upload_files(
        self,
        path: str,
        files: Sequence[FilePayload],
        params: Sequence[tuple[str, str]],
    ) -> bytes:
        """POST multipart; devuelve el body crudo (envelope JSON sin decodificar)."""

        ...

    async def download_file(self, path: str, params: Sequence[tuple[str, str]]) -> FilePayload | None:
        """GET con query string; devuelve el fichero o `None` si no hay fichero ni error."""

        ...
