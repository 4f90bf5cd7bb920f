"""Limpieza de certificados antiguos.

Se separa en dos pasos para no re-escanear un directorio que está mutando:
primero se recogen todas las coincidencias en un set, luego se borran.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from core.domain.models import CleanupReport
from core.interfaces.cert_tool import ConfirmationProvider

# Convenciones de nombres heredadas (mkcert por defecto, Traefik, etc.).
LEGACY_PATTERNS: tuple[str, ...] = ("*.pem", "*localhost*.pem", "_wildcard.*")


def is_affirmative(answer: str | None) -> bool:
    """Solo `y`/`Y` cuenta como sí; vacío o cualquier otra cosa es no."""

    return (answer or "").strip() in ("y", "Y")


def find_certificate_artifacts(
    directory: Path,
    *,
    cert_file: Path,
    key_file: Path,
    patterns: Iterable[str] = LEGACY_PATTERNS,
) -> list[Path]:
    """Ficheros regulares que coinciden con algún patrón o con los ficheros configurados."""

    found: set[Path] = set()
    for pattern in patterns:
        try:
            candidates = [c for c in directory.glob(pattern) if c.is_file()]
        except OSError:
            continue
        found.update(candidates)

    for target in (cert_file, key_file):
        candidate = target if target.is_absolute() else directory / target
        try:
            if candidate.is_file():
                found.add(candidate)
        except OSError:
            # Nombre demasiado largo, directorio sin permisos...: no hay nada que limpiar.
            continue

    return sorted(found)


def remove_artifacts(paths: Sequence[Path]) -> tuple[list[Path], list[Path]]:
    """Borra best-effort. Devuelve `(removed, failed)`."""

    removed: list[Path] = []
    failed: list[Path] = []
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            failed.append(path)
            continue
        removed.append(path)
    return removed, failed


def clean_existing_certificates(
    directory: Path,
    *,
    cert_file: Path,
    key_file: Path,
    confirm: ConfirmationProvider,
    patterns: Iterable[str] = LEGACY_PATTERNS,
) -> CleanupReport:
    """Busca, pide confirmación y borra.

    `confirm` solo se invoca si hay coincidencias.
    """

    matched = find_certificate_artifacts(
        directory,
        cert_file=cert_file,
        key_file=key_file,
        patterns=patterns,
    )
    if not matched:
        return CleanupReport()

    if not confirm(matched):
        return CleanupReport(matched=matched, confirmed=False)

    removed, failed = remove_artifacts(matched)
    return CleanupReport(matched=matched, removed=removed, failed=failed, confirmed=True)
