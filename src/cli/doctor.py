"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.mkcert import MkcertTool, locate_mkcert
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import CertToolError
from core.services.domain_resolver import resolve_domains

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(binary: str) -> tuple[bool, str]:
    path = locate_mkcert(binary)
    if path is None:
        return False, f"'{binary}' not found in PATH"
    return True, str(path)


def _check_ca_root(binary: str) -> tuple[bool, str]:
    try:
        return True, MkcertTool(binary).ca_root()
    except CertToolError as exc:
        return False, str(exc)


def _file_status(path: Path) -> str:
    try:
        exists = path.is_file()
    except OSError as exc:
        return f"unusable path ({exc.strerror})"
    return "exists (will be replaced)" if exists else "not present"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="localcert Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_bin, detail_bin = _check_binary(settings.mkcert_binary)
    table.add_row("mkcert binary", "OK" if ok_bin else "FAIL", detail_bin)

    if ok_bin:
        ok_root, detail_root = _check_ca_root(settings.mkcert_binary)
        table.add_row("CA root", "OK" if ok_root else "FAIL", detail_root)
    else:
        table.add_row("CA root", "SKIPPED", "mkcert not available")

    resolved = resolve_domains(None, settings.domains_file)
    status = "OK" if not resolved.warnings else "DEFAULTS"
    table.add_row("Domains", status, f"{resolved.source.label()}: {' '.join(resolved.domains)}")

    table.add_row("Certificate file", "OK", f"{settings.cert_file} ({_file_status(settings.cert_file)})")
    table.add_row("Key file", "OK", f"{settings.key_file} ({_file_status(settings.key_file)})")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.is_file() else "OPTIONAL", str(env_file))

    _console.print(table)

    if not ok_bin:
        _console.print(
            "\n[yellow]Note:[/yellow] Install mkcert (https://github.com/FiloSottile/mkcert) "
            "or set LOCALCERT_MKCERT_BINARY to its path."
        )
    for warning in resolved.warnings:
        _console.print(Text.assemble(("Note: ", "yellow"), warning), highlight=False)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    settings = AppSettings()

    binary = typer.prompt("mkcert binary", default=settings.mkcert_binary, show_default=True).strip()
    cert_file = typer.prompt("Certificate file", default=str(settings.cert_file), show_default=True).strip()
    key_file = typer.prompt("Key file", default=str(settings.key_file), show_default=True).strip()
    domains_file = typer.prompt("Domains file", default=str(settings.domains_file), show_default=True).strip()

    if not binary or not cert_file or not key_file:
        raise typer.BadParameter("mkcert binary, certificate file and key file are required")

    env_path = write_user_env_vars(
        {
            "LOCALCERT_MKCERT_BINARY": binary,
            "LOCALCERT_CERT_FILE": cert_file,
            "LOCALCERT_KEY_FILE": key_file,
            "LOCALCERT_DOMAINS_FILE": domains_file or ".domains",
        }
    )

    _console.print(f"[green]Saved localcert config to:[/green] {env_path}")


def run_doctor() -> None:
    app()
