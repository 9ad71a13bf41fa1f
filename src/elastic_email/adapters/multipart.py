"""Construcción de cuerpos multipart y parsing de `Content-Disposition`.

Por qué a mano y no `httpx` `files=`:
- El API espera las partes de fichero con el nombre `filefoobarname`, los
  campos antes que los ficheros y un boundary propio.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence

from elastic_email.core.domain.models import FilePayload

FILE_FIELD_NAME = "filefoobarname"
_CRLF = "\r\n"


def new_boundary() -> str:
    """Delimitador basado en un contador de alta resolución (no es secreto)."""

    return "---------------------------" + format(time.perf_counter_ns(), "x")


def encode_multipart(
    fields: Iterable[tuple[str, str]],
    files: Sequence[FilePayload],
    *,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """Devuelve `(body, boundary)` para `multipart/form-data`."""

    boundary = boundary or new_boundary()
    parts: list[bytes] = []

    for name, value in fields:
        parts.append(f"--{boundary}{_CRLF}".encode("utf-8"))
        parts.append(f'Content-Disposition: form-data; name="{name}"{_CRLF}{_CRLF}'.encode("utf-8"))
        parts.append(value.encode("utf-8"))
        parts.append(_CRLF.encode("utf-8"))

    for payload in files:
        parts.append(f"--{boundary}{_CRLF}".encode("utf-8"))
        parts.append(
            f'Content-Disposition: form-data; name="{FILE_FIELD_NAME}"; '
            f'filename="{payload.file_name}"{_CRLF}'.encode("utf-8")
        )
        parts.append(f"Content-Type: {payload.effective_content_type()}{_CRLF}{_CRLF}".encode("utf-8"))
        parts.append(payload.content)
        parts.append(_CRLF.encode("utf-8"))

    parts.append(f"--{boundary}--{_CRLF}".encode("utf-8"))
    return b"".join(parts), boundary


def extract_filename(content_disposition: str | None) -> str | None:
    """Extrae el filename del header `Content-Disposition`.

    - Gana el primer token `filename=` (búsqueda literal, sensible a mayúsculas).
    - Se descartan comillas y parámetros posteriores (`; size=120`).
    - Un valor entre comillas puede contener `;`.
    """

    if not content_disposition:
        return None
    marker = "filename="
    start = content_disposition.find(marker)
    if start < 0:
        return None
    value = content_disposition[start + len(marker):].lstrip()
    if value[:1] in ('"', "'"):
        closing = value.find(value[0], 1)
        if closing > 0:
            return value[1:closing] or None
        value = value[1:]
    value = value.split(";", 1)[0].strip()
    return value or None
