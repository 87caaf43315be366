from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from ofdb_cli.config import ConfigurationError
from ofdb_cli.domain.report import Report
from ofdb_cli.ui import cli as cli_module


@pytest.fixture(autouse=True)
def quiet_startup(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, object]]:
    calls: list[dict[str, object]] = []

    def fake_configure_logging(**kwargs: object) -> None:
        calls.append(kwargs)

    monkeypatch.setattr(cli_module, "load_dotenv", lambda: False)
    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)
    return calls


def test_import_command_prints_report(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_import(path: Path, **kwargs: object) -> Report[object]:
        captured["path"] = path
        captured.update(kwargs)
        return Report()

    monkeypatch.setattr(cli_module, "import_places", fake_import)

    cli_module.main(["--api-url", "https://api.test/v0", "import", "places.csv"])

    assert captured == {"path": Path("places.csv"), "api_url": "https://api.test/v0"}
    assert json.loads(capsys.readouterr().out)["successes"] == []


def test_report_option_writes_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(cli_module, "patch_places_from_file", lambda *_, **__: Report())
    target = tmp_path / "report.json"

    cli_module.main(["--report", str(target), "patch", "patch.csv"])

    assert json.loads(target.read_text())["failures"] == []


def test_read_command_passes_ids(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_read(ids: list[str], **kwargs: object) -> list[object]:
        captured["ids"] = ids
        captured.update(kwargs)
        return []

    monkeypatch.setattr(cli_module, "read_catalog_places", fake_read)

    cli_module.main(["read", "a", "b"])

    assert captured == {"ids": ["a", "b"], "api_url": None}
    assert capsys.readouterr().out == "[]\n"


def test_verbose_switches_to_debug(
    monkeypatch: pytest.MonkeyPatch, quiet_startup: list[dict[str, object]]
) -> None:
    monkeypatch.setattr(cli_module, "review_places_from_file", lambda *_, **__: [])

    cli_module.main(["-v", "review", "review.csv"])

    assert quiet_startup == [{}, {"level": logging.DEBUG, "force": True}]


def test_missing_command_is_an_argument_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2


def test_configuration_error_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_update(*_: object, **__: object) -> None:
        raise ConfigurationError("OFDB_EMAIL and OFDB_PASSWORD must be set together")

    monkeypatch.setattr(cli_module, "update_places_from_file", fake_update)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update", "places.csv"])

    assert excinfo.value.code == 2


def test_unsupported_file_exits_with_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["import", str(tmp_path / "places.xlsx")])

    assert excinfo.value.code == 2


def test_fatal_error_exits_with_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["review", str(tmp_path / "missing.csv")])

    assert excinfo.value.code == 1
