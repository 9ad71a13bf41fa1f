"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo los conceptos del API.
"""

from elastic_email.core.domain.enums import *  # noqa: F401,F403
from elastic_email.core.domain.models import *  # noqa: F401,F403
