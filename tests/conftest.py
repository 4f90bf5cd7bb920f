"""Pytest fixtures shared across the suite."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from core.domain.errors import CertToolError


class FakeCertTool:
    """Records calls; `fail` maps an operation name to the exit status to raise."""

    def __init__(self, fail: dict[str, int] | None = None, root: str = "/fake/caroot") -> None:
        self.fail = fail or {}
        self.root = root
        self.calls: list[tuple] = []

    def _maybe_fail(self, op: str, *command: str) -> None:
        if op in self.fail:
            raise CertToolError(["mkcert", *command], self.fail[op], f"{op} failed")

    def ca_root(self) -> str:
        self.calls.append(("ca_root",))
        self._maybe_fail("ca_root", "-CAROOT")
        return self.root

    def generate(self, cert_file: Path, key_file: Path, domains: Sequence[str]) -> None:
        self.calls.append(("generate", Path(cert_file), Path(key_file), list(domains)))
        self._maybe_fail("generate", "-cert-file", str(cert_file))
        cert_path = Path(cert_file)
        if not cert_path.is_absolute():
            cert_path = Path.cwd() / cert_path
        cert_path.write_text("CERT", encoding="utf-8")

    def uninstall(self) -> None:
        self.calls.append(("uninstall",))
        self._maybe_fail("uninstall", "-uninstall")

    def install(self) -> None:
        self.calls.append(("install",))
        self._maybe_fail("install", "-install")

    def ops(self) -> list[str]:
        return [call[0] for call in self.calls]


class ScriptedConfirm:
    """Confirmation provider that returns a fixed answer and remembers what it was shown."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.asked_with: list[list[Path]] = []

    def __call__(self, paths: Sequence[Path]) -> bool:
        self.asked_with.append(list(paths))
        return self.answer


@pytest.fixture
def fake_tool() -> FakeCertTool:
    return FakeCertTool()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory, isolated from LOCALCERT_* settings."""

    for name in ("MKCERT_BINARY", "CERT_FILE", "KEY_FILE", "DOMAINS_FILE", "FORCE"):
        monkeypatch.delenv(f"LOCALCERT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
