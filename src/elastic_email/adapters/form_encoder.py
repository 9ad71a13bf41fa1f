"""Codificación de parámetros a pares `(clave, valor)`.

Por qué una clase y no un dict:
- La misma clave puede repetirse (parámetros "repeatable").
- El orden de inserción se conserva (orden de los elementos de una lista).

Semántica de "no enviado":
- `None` significa que el caller no fijó el parámetro y no se envía.
- Cualquier otro valor se envía, incluso si coincide con el default del servidor.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from elastic_email.core.domain.enums import ApiEnum, api_name


def format_datetime(value: date) -> str:
    """Formato invariante `M/d/yyyy h:mm:ss tt` (p.ej. `1/5/2024 3:04:05 PM`)."""

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    hour12 = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{value.month}/{value.day}/{value.year} "
        f"{hour12}:{value.minute:02d}:{value.second:02d} {meridiem}"
    )


def format_value(value: Any) -> str:
    """Stringifica un valor escalar con reglas independientes del locale."""

    # bool antes que int: bool es subclase de int.
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, ApiEnum):
        return api_name(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (datetime, date)):
        return format_datetime(value)
    return str(value)


class FormParams:
    """Mapa de parámetros multi-valor listo para form/query/multipart.

    La `apikey` no pasa por aquí: la añade el transporte en cada request.
    """

    def __init__(self) -> None:
        self._items: list[tuple[str, str]] = []

    def add(self, key: str, value: Any) -> "FormParams":
        if value is None:
            return self
        self._items.append((key, format_value(value)))
        return self

    def add_list(self, key: str, values: Iterable[Any] | None, *, repeat: bool = False) -> "FormParams":
        """Lista: una entrada por elemento si `repeat`, si no una sola unida por comas."""

        if values is None:
            return self
        formatted = [format_value(v) for v in values]
        if repeat:
            self._items.extend((key, v) for v in formatted)
        else:
            self._items.append((key, ",".join(formatted)))
        return self

    def add_map(self, prefix: str, mapping: Mapping[str, Any] | None) -> "FormParams":
        """Diccionario: cada entrada se envía como `<prefix>_<clave>`."""

        if mapping is None:
            return self
        for entry_key, entry_value in mapping.items():
            self.add(f"{prefix}_{entry_key}", entry_value)
        return self

    def add_json(self, key: str, model: BaseModel | None) -> "FormParams":
        """Objetos complejos (campaign, survey) viajan como JSON con nombres del wire."""

        if model is None:
            return self
        self._items.append((key, model.model_dump_json(by_alias=True, exclude_none=True)))
        return self

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def keys(self) -> list[str]:
        return [k for k, _ in self._items]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._items)

    def __repr__(self) -> str:
        # Sin valores: pueden incluir la API key.
        return f"FormParams(keys={self.keys()!r})"
