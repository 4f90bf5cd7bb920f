"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El pipeline solo emite eventos; aquí se decide cómo se ven.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Sequence

import click
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import GenerationResult
from core.interfaces.cert_tool import ConfirmationProvider
from core.services.cert_pipeline import PipelineHooks
from core.services.cleanup import is_affirmative

REMOVE_PROMPT = "Do you want to remove existing certificates? (y/N): "


def print_banner(console: Console) -> None:
    title = Text("localcert", style="bold cyan")
    subtitle = Text("mkcert Certificate Generator", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_artifacts_table(paths: Sequence[Path]) -> Table:
    """Equivalente a `ls -la` de los ficheros encontrados."""

    table = Table(title="Found existing certificate files")
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Size", style="white", justify="right")
    table.add_column("Modified", style="dim")
    for path in paths:
        try:
            stat = path.stat()
        except OSError:
            table.add_row(str(path), "?", "?")
            continue
        modified = datetime.fromtimestamp(stat.st_mtime).strftime("%Y-%m-%d %H:%M")
        table.add_row(str(path), str(stat.st_size), modified)
    return table


def build_summary_panel(result: GenerationResult) -> Panel:
    body = Text()
    body.append("Certificate: ", style="bold")
    body.append(f"{result.cert_file}\n")
    body.append("Private key: ", style="bold")
    body.append(f"{result.key_file}\n")
    body.append("CA Root: ", style="bold")
    body.append(f"{result.ca_root or 'unknown'}\n")
    body.append("Domains: ", style="bold")
    body.append(" ".join(result.domains.domains))
    if result.cleanup.failed:
        body.append(f"\n\nCould not remove {len(result.cleanup.failed)} old file(s).", style="dim")
    body.append(
        "\n\nYou may need to restart your browser for the certificates to take effect.",
        style="dim",
    )
    return Panel(body, title=Text("Certificate generation complete!", style="bold green"), border_style="green")


def _read_single_key() -> str:
    # Sin TTY (pipes, CI) no hay modo raw: se lee una línea y se usa su primer carácter.
    if sys.stdin.isatty():
        return click.getchar()
    line = sys.stdin.readline()
    return line[:1]


def build_confirmation_provider(console: Console) -> ConfirmationProvider:
    """Pregunta y/N con una sola tecla."""

    def _ask(_: Sequence[Path]) -> bool:
        console.print(REMOVE_PROMPT, end="")
        try:
            answer = _read_single_key()
        except (EOFError, OSError):
            answer = ""
        console.print(answer.strip())
        return is_affirmative(answer)

    return _ask


def build_pipeline_hooks(console: Console) -> PipelineHooks:
    def _stage(title: str) -> None:
        console.print()
        console.rule(f"[bold]{title}[/bold]")

    def _info(message: str) -> None:
        console.print(message, markup=False, highlight=False)

    def _warning(message: str) -> None:
        console.print(Text.assemble(("Warning: ", "yellow"), message), highlight=False)

    def _artifacts(paths: Sequence[Path]) -> None:
        console.print(build_artifacts_table(paths))

    return PipelineHooks(stage=_stage, info=_info, warning=_warning, artifacts_found=_artifacts)
