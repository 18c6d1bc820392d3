from __future__ import annotations

import json
from pathlib import Path

import pytest

from geometry_text.scripts import scan_obj

SAMPLE = (
    "# cube\n"
    "mtllib cube.mtl\n"
    "\n"
    "v 1.0 2.0 3.0\n"
    "v -1 0.5 2e1\n"
    "  usemtl wood\n"
    "f 1/1 2/2 3/3\n"
)


@pytest.fixture()
def obj_file(tmp_path: Path) -> Path:
    path = tmp_path / "cube.obj"
    path.write_bytes(SAMPLE.encode("latin-1"))
    return path


def test_tokens_writes_jsonl(obj_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "tokens.jsonl"
    scan_obj.main(["tokens", str(obj_file), "--output", str(output)])
    records = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert len(records) == 6
    assert records[2] == {"line": 4, "keyword": "v", "fields": ["1.0", "2.0", "3.0"]}


def test_tokens_defaults_to_stdout(obj_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scan_obj.main(["tokens", str(obj_file)])
    lines = capsys.readouterr().out.splitlines()
    assert json.loads(lines[-1])["keyword"] == "f"


def test_collect_stats_counts_keywords(obj_file: Path) -> None:
    stats = scan_obj.collect_stats(obj_file)
    assert stats.lines == 7
    assert stats.records["v"] == 2
    assert stats.numeric_fields["v"] == 6
    assert stats.numeric_fields["f"] == 0


def test_stats_prints_table(obj_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scan_obj.main(["stats", str(obj_file)])
    rows = [line.split() for line in capsys.readouterr().out.splitlines()]
    resolved = str(obj_file.resolve())
    assert [resolved, "v", "2", "6"] in rows
    assert [resolved, "(lines)", "7"] in rows


def test_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        scan_obj.main(["stats", str(tmp_path / "missing.obj")])


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    scan_obj.main([])
    assert "usage" in capsys.readouterr().out


def test_collect_stats_on_crlf_file(tmp_path: Path) -> None:
    path = tmp_path / "cube_crlf.obj"
    path.write_bytes(SAMPLE.replace("\n", "\r\n").encode("latin-1"))
    stats = scan_obj.collect_stats(path)
    assert stats.lines == 7
    assert stats.records["v"] == 2
