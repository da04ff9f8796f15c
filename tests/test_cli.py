import json
from pathlib import Path

from click.testing import CliRunner

from wxmlgen.cli.main import cli

PAGE = {
    "name": "index",
    "ast": {
        "type": 1,
        "tag": "button",
        "_hid": 0,
        "events": {"click": {"value": "save", "modifiers": {}}},
        "children": [{"type": 3, "text": "Save"}],
    },
}


def write(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_render(tmp_path: Path) -> None:
    source = write(tmp_path / "index.json", PAGE)
    result = CliRunner().invoke(cli, ["render", str(source)])

    assert result.exit_code == 0, result.output
    assert '<template name="index"><button class="_button"' in result.output
    assert 'bindtap="proxyEvent"' in result.output


def test_render_name_override(tmp_path: Path) -> None:
    source = write(tmp_path / "index.json", PAGE)
    result = CliRunner().invoke(cli, ["render", str(source), "--name", "home"])

    assert result.exit_code == 0, result.output
    assert '<template name="home">' in result.output


def test_render_invalid_document(tmp_path: Path) -> None:
    source = write(tmp_path / "index.json", {"name": "index"})
    result = CliRunner().invoke(cli, ["render", str(source)])

    assert result.exit_code == 1
    assert "compile error" not in result.output


def test_render_generation_failure(tmp_path: Path) -> None:
    source = write(tmp_path / "index.json", {"ast": {"type": 2, "text": "{{ x }}"}})
    result = CliRunner().invoke(cli, ["render", str(source)])

    assert result.exit_code == 1
    assert "compile error" in result.output


def test_render_invalid_utf8(tmp_path: Path) -> None:
    source = tmp_path / "index.json"
    source.write_bytes(b"\xff\xfe{}")
    result = CliRunner().invoke(cli, ["render", str(source)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_build(tmp_path: Path) -> None:
    write(tmp_path / "src" / "index.json", PAGE)
    out_dir = tmp_path / "out"
    result = CliRunner().invoke(
        cli, ["build", str(tmp_path / "src"), "--out-dir", str(out_dir)]
    )

    assert result.exit_code == 0, result.output
    assert "Build complete" in result.output
    assert (out_dir / "index.wxml").exists()


def test_build_reports_failures(tmp_path: Path) -> None:
    write(tmp_path / "src" / "index.json", PAGE)
    (tmp_path / "src" / "broken.json").write_text("{", encoding="utf-8")
    out_dir = tmp_path / "out"
    result = CliRunner().invoke(
        cli, ["build", str(tmp_path / "src"), "--out-dir", str(out_dir)]
    )

    assert result.exit_code == 1
    assert "failures=1" in result.output
    assert (out_dir / "index.wxml").exists()


def test_build_default_out_dir(tmp_path: Path, monkeypatch) -> None:
    write(tmp_path / "src" / "index.json", PAGE)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build", "src"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / ".wxmlgen" / "build" / "index.wxml").exists()
