"""CLI (Typer + Rich) sobre `ElasticEmailClient`.

Por qué una CLI en una librería cliente:
- Diagnóstico rápido de configuración (`doctor`) sin escribir código.
- Operaciones frecuentes de operador (overview, listas, envío de prueba).
"""
