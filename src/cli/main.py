"""CLI principal: `localcert`.

Un único comando que replica el flujo clásico de `mkcert.sh`:
limpia certificados antiguos, genera uno nuevo y reinstala la CA.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from adapters.mkcert import MkcertTool
from cli.ui_components import (
    build_confirmation_provider,
    build_pipeline_hooks,
    build_summary_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import CertToolError
from core.domain.models import CertificateRequest
from core.services.cert_pipeline import generate_certificates

EPILOG = """
Domains are taken from, in order of preference: --domains "example.com,localhost,127.0.0.1";
the domains file (one domain per line, # for comments); the defaults *.localhost localhost 127.0.0.1 ::1.

Examples: localcert --force | localcert --cert-file wildcard.crt --key-file wildcard.key |
localcert --cert-file _wildcard.localhost+3.pem --key-file _wildcard.localhost+3-key.pem |
localcert --file my-domains.txt

Existing certificate files are removed before generation and the CA certificate is reinstalled.
A browser restart may be required for certificates to take effect.
"""

app = typer.Typer(add_completion=False)

_console = Console()


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    epilog=EPILOG,
)
def generate(
    force: bool | None = typer.Option(
        None,
        "--force/--no-force",
        "-f",
        help="Skip confirmation prompts (useful for automation). Overrides LOCALCERT_FORCE.",
    ),
    cert_file: Path | None = typer.Option(
        None,
        "--cert-file",
        metavar="FILE",
        help="Certificate output file (default: cert.pem).",
    ),
    key_file: Path | None = typer.Option(
        None,
        "--key-file",
        metavar="FILE",
        help="Private key output file (default: key.pem).",
    ),
    domains: str | None = typer.Option(
        None,
        "--domains",
        metavar="CSV",
        help="Comma-separated list of domains.",
    ),
    domains_file: Path | None = typer.Option(
        None,
        "--file",
        metavar="FILE",
        help="Domains file to read from (default: .domains).",
    ),
) -> None:
    """Generate SSL certificates with mkcert and reinstall its CA certificate."""

    settings = AppSettings()
    request = CertificateRequest(
        cert_file=cert_file or settings.cert_file,
        key_file=key_file or settings.key_file,
        domains_csv=domains,
        domains_file=domains_file or settings.domains_file,
        force=settings.force if force is None else force,
        working_dir=Path.cwd(),
    )

    print_banner(_console)
    try:
        result = generate_certificates(
            request=request,
            tool=MkcertTool(settings.mkcert_binary),
            confirm=build_confirmation_provider(_console),
            hooks=build_pipeline_hooks(_console),
        )
    except CertToolError as exc:
        _console.print()
        _console.print(Text.assemble(("Error: ", "bold red"), str(exc)), highlight=False)
        if exc.stderr.strip():
            _console.print(exc.stderr.strip(), markup=False, style="dim")
        raise typer.Exit(code=exc.returncode if exc.returncode > 0 else 1) from exc

    _console.print()
    _console.print(build_summary_panel(result))


def run() -> None:
    app()
