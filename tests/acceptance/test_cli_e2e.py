"""
End-to-end acceptance tests for the subtag-registry command.

Runs ``main()`` exactly as the console script does: settings come from
SUBTAG_REGISTRY_* environment variables, YAML goes to stdout, logs go to
stderr, and failures end the process with exit status 1.

Each test follows Given/When/Then BDD structure in its docstring.

Markers: @pytest.mark.acceptance
"""

from __future__ import annotations

import shutil
from datetime import date
from pathlib import Path

import httpx
import pytest
import respx
import yaml

from subtag_registry.main import main
from tests.conftest import SAMPLE_RECORD_COUNT, SAMPLE_REGISTRY, fixture_path

pytestmark = pytest.mark.acceptance

URL = "https://registry.example.com/language-subtag-registry"


@pytest.fixture()
def cache_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the command at a cache file under tmp_path and a simulated URL."""
    path = tmp_path / "registry.txt"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SUBTAG_REGISTRY_REGISTRY__URL", URL)
    monkeypatch.setenv("SUBTAG_REGISTRY_REGISTRY__CACHE_PATH", str(path))
    monkeypatch.setenv("SUBTAG_REGISTRY_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("SUBTAG_REGISTRY_LOG_LEVEL", "INFO")
    return path


def test_prints_yaml_for_cached_registry(
    cache_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """
    GIVEN the sample registry already cached
    WHEN the command runs
    THEN stdout holds only the YAML document for every record.
    """
    shutil.copyfile(fixture_path(SAMPLE_REGISTRY), cache_path)

    main()

    out = capsys.readouterr().out
    data = yaml.safe_load(out)
    assert data["filedate"] == date(2022, 8, 8)
    assert len(data["entries"]) == SAMPLE_RECORD_COUNT


@respx.mock
def test_downloads_and_caches_on_first_run(
    cache_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """
    GIVEN no cache file and a reachable registry
    WHEN the command runs
    THEN the registry is downloaded, cached, and printed as YAML.
    """
    body = fixture_path(SAMPLE_REGISTRY).read_text(encoding="utf-8")
    respx.get(URL).mock(return_value=httpx.Response(200, text=body))

    main()

    assert cache_path.read_text(encoding="utf-8") == body
    assert yaml.safe_load(capsys.readouterr().out)["entries"][0]["subtag"] == "aa"


def test_malformed_registry_exits_non_zero(
    cache_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """
    GIVEN a cached registry with a record carrying an unknown field
    WHEN the command runs
    THEN it exits with status 1 and prints nothing on stdout.
    """
    cache_path.write_text("File-Date: 2022-08-08\n%%\nType: language\nColour: red\n")

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


@respx.mock
def test_unreachable_registry_exits_non_zero(
    cache_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    respx.get(URL).mock(return_value=httpx.Response(404))

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert not cache_path.exists()
    assert capsys.readouterr().out == ""


def test_invalid_configuration_exits_non_zero(
    cache_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SUBTAG_REGISTRY_LOG_LEVEL", "CHATTY")

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("FATAL: CONFIGURATION_ERROR: Invalid settings")
