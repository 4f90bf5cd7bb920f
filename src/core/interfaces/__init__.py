"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos (mkcert, stubs de tests).
- El pipeline depende de `CertificateTool`, nunca de `subprocess`.
"""
