"""Contratos de la herramienta de certificados.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline no sabe si detrás hay mkcert, un stub de tests u otra CA local.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, Sequence, runtime_checkable

# Recibe los ficheros encontrados y devuelve si se pueden borrar.
ConfirmationProvider = Callable[[Sequence[Path]], bool]


@runtime_checkable
class CertificateTool(Protocol):
    """Operaciones mínimas que el pipeline delega en la herramienta externa.

    Reglas de diseño:
    - Todas son síncronas y bloquean hasta que la herramienta termina.
    - Un fallo se señala con `core.domain.errors.CertToolError`.
    """

    def ca_root(self) -> str:
        """Devuelve el directorio donde vive la CA raíz."""

        ...

    def generate(self, cert_file: Path, key_file: Path, domains: Sequence[str]) -> None:
        """Genera certificado y clave para `domains`."""

        ...

    def uninstall(self) -> None:
        """Elimina la CA raíz de los trust stores (si estaba instalada)."""

        ...

    def install(self) -> None:
        """Instala la CA raíz en los trust stores del sistema y navegadores."""

        ...


def always_confirm(_: Sequence[Path]) -> bool:
    """Proveedor usado en modo `--force`."""

    return True
