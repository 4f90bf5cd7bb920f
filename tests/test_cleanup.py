from __future__ import annotations

from pathlib import Path

import pytest

from conftest import ScriptedConfirm
from core.services.cleanup import (
    clean_existing_certificates,
    find_certificate_artifacts,
    is_affirmative,
    remove_artifacts,
)


def _touch(directory: Path, *names: str) -> list[Path]:
    paths = []
    for name in names:
        path = directory / name
        path.write_text("x", encoding="utf-8")
        paths.append(path)
    return paths


@pytest.mark.parametrize("answer", ["y", "Y", " y\n"])
def test_affirmative_answers(answer: str) -> None:
    assert is_affirmative(answer)


@pytest.mark.parametrize("answer", ["", "n", "N", "yes", "x", None])
def test_non_affirmative_answers(answer: str | None) -> None:
    assert not is_affirmative(answer)


def test_finds_legacy_and_configured_files(tmp_path: Path) -> None:
    _touch(
        tmp_path,
        "cert.pem",
        "key.pem",
        "localhost+3.pem",
        "_wildcard.localhost+3-key.pem",
        "_wildcard.crt",
        "wildcard.crt",
        "notes.txt",
    )
    (tmp_path / "dir.pem").mkdir()

    found = find_certificate_artifacts(
        tmp_path,
        cert_file=Path("wildcard.crt"),
        key_file=Path("wildcard.key"),
    )

    assert [p.name for p in found] == sorted(
        [
            "_wildcard.crt",
            "_wildcard.localhost+3-key.pem",
            "cert.pem",
            "key.pem",
            "localhost+3.pem",
            "wildcard.crt",
        ]
    )


def test_overlapping_patterns_yield_each_file_once(tmp_path: Path) -> None:
    _touch(tmp_path, "localhost.pem")

    found = find_certificate_artifacts(
        tmp_path,
        cert_file=Path("localhost.pem"),
        key_file=Path("key.pem"),
    )

    assert found == [tmp_path / "localhost.pem"]


def test_absolute_configured_path(tmp_path: Path) -> None:
    outside = tmp_path / "elsewhere"
    outside.mkdir()
    (cert,) = _touch(outside, "site.crt")
    workdir = tmp_path / "work"
    workdir.mkdir()

    found = find_certificate_artifacts(workdir, cert_file=cert, key_file=Path("key.pem"))

    assert found == [cert]


def test_nothing_to_clean_does_not_ask(tmp_path: Path) -> None:
    confirm = ScriptedConfirm(True)

    report = clean_existing_certificates(
        tmp_path,
        cert_file=Path("cert.pem"),
        key_file=Path("key.pem"),
        confirm=confirm,
    )

    assert report.matched == []
    assert not report.skipped
    assert confirm.asked_with == []


def test_declined_confirmation_keeps_files(tmp_path: Path) -> None:
    paths = _touch(tmp_path, "cert.pem", "_wildcard.key")
    confirm = ScriptedConfirm(False)

    report = clean_existing_certificates(
        tmp_path,
        cert_file=Path("cert.pem"),
        key_file=Path("key.pem"),
        confirm=confirm,
    )

    assert report.skipped
    assert report.removed == []
    assert all(p.exists() for p in paths)
    assert confirm.asked_with == [sorted(paths)]


def test_confirmed_cleanup_removes_everything(tmp_path: Path) -> None:
    paths = _touch(tmp_path, "cert.pem", "key.pem", "_wildcard.localhost.pem")
    (keep,) = _touch(tmp_path, ".domains")

    report = clean_existing_certificates(
        tmp_path,
        cert_file=Path("cert.pem"),
        key_file=Path("key.pem"),
        confirm=ScriptedConfirm(True),
    )

    assert report.confirmed
    assert sorted(report.removed) == sorted(paths)
    assert not any(p.exists() for p in paths)
    assert keep.exists()


def test_remove_artifacts_tolerates_failures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first, broken, last = _touch(tmp_path, "a.pem", "b.pem", "c.pem")
    original_unlink = Path.unlink

    def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
        if self == broken:
            raise PermissionError("read-only")
        original_unlink(self, missing_ok=missing_ok)

    monkeypatch.setattr(Path, "unlink", flaky_unlink)

    removed, failed = remove_artifacts([first, broken, last])

    assert removed == [first, last]
    assert failed == [broken]
    assert not first.exists() and not last.exists()


def test_remove_artifacts_ignores_already_missing(tmp_path: Path) -> None:
    removed, failed = remove_artifacts([tmp_path / "gone.pem"])

    assert removed == [tmp_path / "gone.pem"]
    assert failed == []


def test_overlong_configured_names_are_skipped(tmp_path: Path) -> None:
    (existing,) = _touch(tmp_path, "cert.pem")

    found = find_certificate_artifacts(
        tmp_path,
        cert_file=Path("c" * 300),
        key_file=tmp_path / ("k" * 300),
    )

    assert found == [existing]
