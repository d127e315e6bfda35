"""Tests for the command-line entry point."""

import zipfile
from pathlib import Path

import pytest

from zipbatch import main as cli
from zipbatch.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_compile_mode_exits_without_work(capsys) -> None:
    """--compile-mode exits 0 before doing anything."""
    assert cli.main(["--compile-mode"]) == 0
    assert "compilation mode" in capsys.readouterr().out


def test_no_command_prints_help() -> None:
    """Running without a sub-command prints help and exits 2."""
    assert cli.main([]) == 2


def test_divide_with_yes_writes_archives(make_zip) -> None:
    """divide --yes writes the labelled archives next to the input."""
    source = make_zip({f"{i}.txt": b"x" for i in range(3)})

    code = cli.main(["divide", str(source), "--max-files", "2", "--size-mb", "1", "--yes"])

    assert code == 0
    assert (source.parent / "000-000-000-000.zip").exists()
    with zipfile.ZipFile(source.parent / "000-000-000-001.zip") as zf:
        assert zf.namelist() == ["2.txt"]


def test_divide_missing_file_exits_1(tmp_path: Path) -> None:
    """A missing input file exits 1."""
    code = cli.main(["divide", str(tmp_path / "nope.zip"), "--max-files", "2", "--size-mb", "1", "-y"])
    assert code == 1


def test_divide_non_positive_limits_exit_1(make_zip) -> None:
    """Zero or negative limits exit 1."""
    source = make_zip({"a": b"1"})
    assert cli.main(["divide", str(source), "--max-files", "0", "--size-mb", "1", "-y"]) == 1
    assert cli.main(["divide", str(source), "--max-files", "1", "--size-mb", "-2", "-y"]) == 1


def test_divide_declined_confirmation_exits_0_without_work(make_zip, monkeypatch) -> None:
    """Declining the confirmation exits 0 and writes nothing."""
    source = make_zip({"a.txt": b"1"})
    monkeypatch.setattr(cli.Prompt, "ask", lambda *a, **kw: "n")

    code = cli.main(["divide", str(source), "--max-files", "1", "--size-mb", "1"])

    assert code == 0
    assert sorted(p.name for p in source.parent.iterdir()) == ["source.zip"]


@pytest.mark.parametrize("answer", ["s", "sim", "Y", "yes"])
def test_confirm_accepts_yes_answers(monkeypatch, answer: str) -> None:
    """Portuguese and English yes answers confirm."""
    monkeypatch.setattr(cli.Prompt, "ask", lambda *a, **kw: answer)
    assert cli.confirm(assume_yes=False) is True


def test_split_invalid_token_exits_1(make_zip, monkeypatch) -> None:
    """A rejected token exits 1."""
    from zipbatch.domain.exceptions import InvalidToken

    def _reject(self) -> None:
        raise InvalidToken("Invalid token or API error: 401 - unauthorized")

    monkeypatch.setattr(cli.ArchivesApiClient, "validate_token", _reject)
    source = make_zip({"a.xml": b"<a/>"})

    assert cli.main(["split", str(source), "--token", "bad", "--env", "development", "-y"]) == 1


def test_split_rejects_unknown_env(make_zip) -> None:
    """An environment outside the table is a usage error."""
    with pytest.raises(SystemExit) as exc:
        cli.main(["split", str(make_zip({})), "--token", "t", "--env", "qa"])
    assert exc.value.code == 2


def test_mask_token() -> None:
    """Only the start of a long token is shown."""
    assert cli.mask_token("abcdefghijklmnop") == "abcdefghijk..."
    assert cli.mask_token("short") == "***"


def test_divide_label_named_source_exits_1_and_stays_intact(make_zip) -> None:
    """An input named like an output label is refused and keeps all its entries."""
    members = {f"{i}.txt": b"x" for i in range(4)}
    source = make_zip(members, name="000-000-000-000.zip")

    code = cli.main(["divide", str(source), "--max-files", "2", "--size-mb", "1", "-y"])

    assert code == 1
    with zipfile.ZipFile(source) as zf:
        assert zf.namelist() == list(members)


def test_split_partial_url_override_still_offers_all_environments(make_zip, monkeypatch) -> None:
    """--env production stays valid when only staging's URL is overridden."""
    seen: list[str] = []

    def _record(self) -> None:
        seen.append(self._base_url)

    monkeypatch.setenv("ZIPBATCH_API_BASE_URLS", '{"staging": "https://s.local"}')
    monkeypatch.setattr(cli.ArchivesApiClient, "validate_token", _record)
    source = make_zip({})

    assert cli.main(["split", str(source), "--token", "t", "--env", "production", "-y"]) == 0
    assert seen == ["https://api.platform.brobot.com.br"]
