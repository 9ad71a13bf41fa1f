"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Los facades de recursos dependen del contrato, no de httpx.
"""
