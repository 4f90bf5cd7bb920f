"""Errores del dominio.

Por qué aquí:
- El Core necesita distinguir un fallo de la herramienta externa sin saber
  que por debajo hay un `subprocess`.
"""

from __future__ import annotations

from typing import Sequence


class CertToolError(RuntimeError):
    """La herramienta de certificados terminó con un estado distinto de 0."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(self.command)} exited with status {returncode}")
