"""Orquestación de la generación de certificados.

El flujo es lineal y fail-fast:

    CAROOT -> dominios -> limpieza -> generate -> uninstall -> install

El pipeline no imprime nada: la CLI recibe los eventos vía `PipelineHooks`
y decide cómo presentarlos. Así los tests pueden ejecutar el flujo completo
con una herramienta falsa y un proveedor de confirmación scriptado.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from core.domain.errors import CertToolError
from core.domain.models import CertificateRequest, GenerationResult
from core.interfaces.cert_tool import CertificateTool, ConfirmationProvider, always_confirm
from core.services.cleanup import clean_existing_certificates
from core.services.domain_resolver import resolve_domains


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (stages, info, warnings)."""

    stage: Callable[[str], None] | None = None
    info: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None
    artifacts_found: Callable[[Sequence[Path]], None] | None = None


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def generate_certificates(
    *,
    request: CertificateRequest,
    tool: CertificateTool,
    confirm: ConfirmationProvider,
    hooks: PipelineHooks | None = None,
) -> GenerationResult:
    """Ejecuta el pipeline completo.

    Raises:
        CertToolError: si falla la generación o la instalación de la CA.
            La limpieza ya hecha no se deshace.
    """

    hooks = hooks or PipelineHooks()

    ca_root: str | None = None
    try:
        ca_root = tool.ca_root()
    except CertToolError as exc:
        _emit(hooks.warning, f"Could not query the CA root: {exc}")
    else:
        _emit(hooks.info, f"Certificate ROOT: {ca_root}")

    resolved = resolve_domains(request.domains_csv, request.domains_file)
    for message in resolved.warnings:
        _emit(hooks.warning, message)
    _emit(hooks.info, f"Using {resolved.source.label()}: {' '.join(resolved.domains)}")

    _emit(hooks.stage, "Cleaning up existing certificates")
    gate = always_confirm if request.force else confirm

    def _confirm(paths: Sequence[Path]) -> bool:
        if hooks.artifacts_found is not None:
            hooks.artifacts_found(paths)
        if request.force:
            _emit(hooks.info, "Force mode: removing existing certificates without confirmation")
        return gate(paths)

    cleanup = clean_existing_certificates(
        request.working_dir,
        cert_file=request.cert_file,
        key_file=request.key_file,
        confirm=_confirm,
    )
    if not cleanup.matched:
        _emit(hooks.info, "No existing certificate files found")
    elif cleanup.skipped:
        _emit(hooks.warning, "Keeping existing certificates. Note: This may cause conflicts.")
    else:
        _emit(hooks.info, "Removed existing certificate files")

    _emit(hooks.stage, "Generating certificates")
    _emit(hooks.info, f"Domains: {' '.join(resolved.domains)}")
    _emit(hooks.info, f"Certificate file: {request.cert_file}")
    _emit(hooks.info, f"Key file: {request.key_file}")
    tool.generate(request.cert_file, request.key_file, resolved.domains)

    _emit(hooks.stage, "Reinstalling root certificate")
    _emit(hooks.info, "Uninstalling existing CA certificate...")
    uninstall_failed = False
    try:
        tool.uninstall()
    except CertToolError as exc:
        uninstall_failed = True
        _emit(hooks.warning, f"Uninstall failed, continuing: {exc}")

    _emit(hooks.info, "Installing fresh CA certificate...")
    tool.install()

    return GenerationResult(
        cert_file=request.cert_file,
        key_file=request.key_file,
        ca_root=ca_root,
        domains=resolved,
        cleanup=cleanup,
        uninstall_failed=uninstall_failed,
    )
