"""Resolución de la lista de dominios.

Precedencia:
1) `--domains` (CSV)
2) fichero de dominios (uno por línea, `#` para comentarios)
3) defaults: `*.localhost localhost 127.0.0.1 ::1`

La función principal es pura: no imprime ni modifica estado global, y
cualquier problema leyendo el fichero degrada a los defaults con un warning.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from core.domain.models import DomainSource, ResolvedDomains

DEFAULT_DOMAINS: tuple[str, ...] = ("*.localhost", "localhost", "127.0.0.1", "::1")


def parse_domains_csv(text: str | None) -> list[str]:
    """`"a, b,,c"` -> `["a", "b", "c"]`."""

    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_domains_lines(lines: Iterable[str]) -> list[str]:
    """Recorta cada línea y descarta vacías y comentarios."""

    domains: list[str] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        domains.append(line)
    return domains


def read_domains_file(path: Path) -> list[str]:
    """Lee `path` como UTF-8. Propaga `OSError`/`UnicodeDecodeError`."""

    return parse_domains_lines(path.read_text(encoding="utf-8").splitlines())


def _is_file(path: Path) -> bool:
    """`Path.is_file` sin excepciones: ENAMETOOLONG, EACCES, etc. cuentan como "no existe"."""

    try:
        return path.is_file()
    except OSError:
        return False


def resolve_domains(
    domains_csv: str | None,
    domains_file: Path | None = None,
    *,
    default: Sequence[str] = DEFAULT_DOMAINS,
) -> ResolvedDomains:
    warnings: list[str] = []

    if domains_csv:
        # Un CSV no vacío nunca consulta el fichero, aunque no deje entradas válidas.
        explicit = parse_domains_csv(domains_csv)
        if explicit:
            return ResolvedDomains(domains=explicit, source=DomainSource.EXPLICIT)
        warnings.append("No valid domains in --domains, using defaults")
        return ResolvedDomains(domains=list(default), source=DomainSource.DEFAULT, warnings=warnings)

    domains_file = domains_file if domains_file is not None else Path(".domains")

    if not _is_file(domains_file):
        warnings.append(f"{domains_file} not found, using defaults")
    else:
        try:
            from_file = read_domains_file(domains_file)
        except (OSError, UnicodeDecodeError) as exc:
            warnings.append(f"Could not read {domains_file} ({exc}), using defaults")
        else:
            if from_file:
                return ResolvedDomains(domains=from_file, source=DomainSource.FILE)
            warnings.append(f"No valid domains found in {domains_file}")

    return ResolvedDomains(domains=list(default), source=DomainSource.DEFAULT, warnings=warnings)
