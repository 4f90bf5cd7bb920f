"""Adaptador de mkcert (subprocess).

Por qué un wrapper:
- Traduce el contrato `CertificateTool` a argv concretos de mkcert.
- Convierte estados de salida != 0 en `CertToolError` con el código original,
  que la CLI propaga como exit code.
- Facilita testeo: `runner` se puede sustituir por un stub de `subprocess.run`.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence

from core.domain.errors import CertToolError
from core.interfaces.cert_tool import CertificateTool

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def locate_mkcert(binary: str = "mkcert") -> Path | None:
    """Ruta absoluta del ejecutable, o None si no está en PATH."""

    found = shutil.which(binary)
    return Path(found) if found else None


class MkcertTool(CertificateTool):
    """`CertificateTool` respaldado por el binario mkcert."""

    def __init__(self, binary: str = "mkcert", *, runner: Runner = subprocess.run) -> None:
        self._binary = binary
        self._runner = runner

    @property
    def binary(self) -> str:
        return self._binary

    def _run(self, *args: str, capture: bool = False) -> subprocess.CompletedProcess[str]:
        command = [self._binary, *args]
        kwargs: dict[str, Any] = {"check": False, "text": True}
        if capture:
            kwargs["capture_output"] = True

        try:
            completed = self._runner(command, **kwargs)
        except FileNotFoundError as exc:
            raise CertToolError(command, 127, str(exc)) from exc
        except PermissionError as exc:
            raise CertToolError(command, 126, str(exc)) from exc

        if completed.returncode != 0:
            raise CertToolError(command, completed.returncode, completed.stderr or "")
        return completed

    def ca_root(self) -> str:
        return (self._run("-CAROOT", capture=True).stdout or "").strip()

    def generate(self, cert_file: Path, key_file: Path, domains: Sequence[str]) -> None:
        self._run("-cert-file", str(cert_file), "-key-file", str(key_file), *domains)

    def uninstall(self) -> None:
        self._run("-uninstall")

    def install(self) -> None:
        self._run("-install")
