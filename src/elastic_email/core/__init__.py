"""Core del cliente: configuración, errores, dominio y contratos.

Por qué separado de `adapters`:
- Aquí no hay I/O; solo definiciones que comparten transporte y facades.
"""
