import json
import runpy
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from inventory import models
from inventory.core.config import get_settings

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "check_db.py"


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _run_script(monkeypatch: pytest.MonkeyPatch, database_url: str) -> None:
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("CHECK_LIMIT", "1")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    # Returning normally means the process would exit with status 0.
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_script_prints_success_line(
    database_url: str,
    seed: Callable[..., None],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    seed(
        models.ProductGroup(id=10, name="A"),
        models.Product(id=1, sku="SKU-1", name="Tile", group_id=10),
        models.Product(id=2, sku="SKU-2", name="Grout", group_id=10),
    )

    _run_script(monkeypatch, database_url)

    captured = capsys.readouterr()
    assert captured.err == ""
    lines = captured.out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Success: ")
    data = json.loads(lines[0].removeprefix("Success: "))
    assert [entry["id"] for entry in data] == [1]
    assert data[0]["group"]["name"] == "A"


@pytest.mark.parametrize(
    "connection_string",
    ["not-a-database-url", "postgresql://user:pw@localhost/db"],
)
def test_script_reports_bad_connection_string(
    connection_string: str,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _run_script(monkeypatch, connection_string)

    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Error: ")


def test_script_reports_unreachable_store(
    missing_database_url: str,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _run_script(monkeypatch, missing_database_url)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert "unable to open database file" in captured.err
