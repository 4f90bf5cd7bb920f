"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de lo que entra al pipeline (paths, listas no vacías)
  sin acoplar el Core a subprocess ni a la CLI.
- Los resultados se pueden volcar a JSON (`model_dump`) para automatizaciones.

Nota:
- Estos modelos describen *qué* se genera, no *cómo* lo hace mkcert.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class DomainSource(str, Enum):
    """Origen de la lista de dominios efectiva."""

    EXPLICIT = "explicit"
    FILE = "file"
    DEFAULT = "default"

    def label(self) -> str:
        """Texto corto para la UI."""

        if self is DomainSource.EXPLICIT:
            return "--domains"
        if self is DomainSource.FILE:
            return "domains file"
        return "built-in defaults"


class ResolvedDomains(BaseModel):
    """Lista de dominios/IPs que se pasará a mkcert.

    Invariantes:
    - Nunca vacía.
    - Conserva el orden y los duplicados tal como vienen de la fuente.
    """

    domains: list[str] = Field(
        ...,
        min_length=1,
        description="Dominios o literales IP, ya recortados.",
    )
    source: DomainSource = Field(
        ...,
        description="De dónde salió la lista (CSV, fichero o defaults).",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Diagnósticos no fatales generados al resolver.",
    )


class CertificateRequest(BaseModel):
    """Parámetros de una ejecución completa."""

    cert_file: Path = Field(default=Path("cert.pem"))
    key_file: Path = Field(default=Path("key.pem"))
    domains_csv: str | None = Field(
        default=None,
        description="Dominios separados por comas (máxima precedencia).",
    )
    domains_file: Path = Field(default=Path(".domains"))
    force: bool = Field(
        default=False,
        description="Borra certificados previos sin pedir confirmación.",
    )
    working_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directorio donde se buscan certificados antiguos.",
    )


class CleanupReport(BaseModel):
    """Resultado de la limpieza de certificados antiguos."""

    matched: list[Path] = Field(default_factory=list)
    removed: list[Path] = Field(default_factory=list)
    failed: list[Path] = Field(
        default_factory=list,
        description="Ficheros que no se pudieron borrar (se ignoran).",
    )
    confirmed: bool = False

    @property
    def skipped(self) -> bool:
        return bool(self.matched) and not self.confirmed


class GenerationResult(BaseModel):
    """Salida del pipeline cuando termina sin errores fatales."""

    cert_file: Path
    key_file: Path
    ca_root: str | None = Field(
        default=None,
        description="Directorio CAROOT de mkcert (informativo).",
    )
    domains: ResolvedDomains
    cleanup: CleanupReport
    uninstall_failed: bool = False
