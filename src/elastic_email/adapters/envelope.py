"""Codec del envelope `{success, error, data}`.

Reglas:
- JSON inválido o sin forma de envelope -> `DecodeError`.
- `success=false` -> `ApiError` con el mensaje del servidor tal cual.
- `success=true` -> `data` validado contra el tipo pedido (`None` = void).
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from elastic_email.core.domain.models import ApiEnvelope
from elastic_email.core.errors import ApiError, DecodeError


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def parse_envelope(body: bytes | str) -> ApiEnvelope:
    """Parsea el body como envelope sin mirar `success`."""

    try:
        raw = json.loads(body)
    except (ValueError, TypeError) as exc:
        raise DecodeError(f"invalid JSON response: {exc}", body=body) from exc

    if not isinstance(raw, dict):
        raise DecodeError("response is not a JSON object", body=body)

    try:
        return ApiEnvelope.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(f"unexpected envelope shape: {exc}", body=body) from exc


def decode(body: bytes | str, result_type: Any = None) -> Any:
    """Devuelve `data` tipado o lanza `ApiError`/`DecodeError`."""

    envelope = parse_envelope(body)
    if not envelope.success:
        raise ApiError(envelope.error or "")

    if result_type is None:
        return None
    if envelope.data is None:
        return None

    try:
        return _adapter(result_type).validate_python(envelope.data)
    except ValidationError as exc:
        raise DecodeError(f"unexpected payload for {result_type!r}: {exc}", body=body) from exc
