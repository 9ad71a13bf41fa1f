"""Adaptadores de I/O (HTTP) y codecs del wire.

Por qué un paquete aparte:
- Todo lo que toca httpx, JSON o multipart vive aquí; el Core no lo conoce.
"""
