import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from retrvid import cli
from retrvid.logging import configure_logging
from retrvid.redaction import Redactor
from retrvid.storage import IdStore


def test_json_logging_structure(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_logging("DEBUG")
    store = IdStore.load(tmp_path / "ids.toml")
    store.add("work", "12345")

    lines = capsys.readouterr().err.strip().splitlines()
    records = [json.loads(line) for line in lines]
    added = next(r for r in records if r["event_type"] == "id_added")
    assert added["name"] == "work"
    assert added["level"] == "info"
    assert "12345" not in lines[-1]
    created = next(r for r in records if r["event_type"] == "store_created")
    assert created["path"] == str(tmp_path / "ids.toml")


def test_default_level_is_warning(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_redactor_masks_tail():
    redactor = Redactor()
    assert redactor.mask("12345") == "12***"
    assert redactor.mask("ab") == "**"
    assert redactor.mask("") == ""


def test_disabled_redactor_passes_through():
    assert Redactor(enabled=False).mask("12345") == "12345"


def test_json_log_for_failed_command(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RETRVID_DATA", str(tmp_path / "ids.toml"))

    with pytest.raises(SystemExit) as exc:
        cli.main(["nope", "--no-copy"])
    assert exc.value.code == 1

    lines = capsys.readouterr().err.strip().splitlines()
    assert lines[-1] == "error: id `nope` not found"
    records = [json.loads(line) for line in lines if line.startswith("{")]
    failed = next(r for r in records if r["event_type"] == "error")
    assert failed["category"] == "not_found"
    assert failed["exit_code"] == 1
    assert failed["error"] == {"type": "NotFoundError", "message": "id `nope` not found"}
