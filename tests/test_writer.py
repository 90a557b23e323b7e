import io
from pathlib import Path

import pytest

from xescsv.errors import FileCreateError, WriteError
from xescsv.writer import write_csv


def test_bom_header_and_rows(tmp_path):
    out = tmp_path / "out.csv"
    n = write_csv(out, ["a", "b"], iter([["1", "2"], ["", "3"]]))
    assert n == 2
    data = out.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    assert data[3:] == b"a,b\n1,2\n,3\n"


def test_quoting(tmp_path):
    out = tmp_path / "out.csv"
    write_csv(out, ["name", "note"], [["Ship, order", 'said "hi"'], ["line\nbreak", "plain"]])
    text = out.read_text(encoding="utf-8-sig")
    assert text == 'name,note\n"Ship, order","said ""hi"""\n"line\nbreak",plain\n'


def test_non_ascii_is_utf8(tmp_path):
    out = tmp_path / "out.csv"
    write_csv(out, ["activité"], [["Zürich"]])
    assert out.read_bytes() == b"\xef\xbb\xbf" + "activité\nZürich\n".encode("utf-8")


def test_header_only(tmp_path):
    out = tmp_path / "out.csv"
    assert write_csv(out, ["a"], []) == 0
    assert out.read_text(encoding="utf-8-sig") == "a\n"


def test_overwrites_existing_file(tmp_path):
    out = tmp_path / "out.csv"
    out.write_text("old content that is longer than the new one\n", encoding="utf-8")
    write_csv(out, ["a"], [["1"]])
    assert out.read_text(encoding="utf-8-sig") == "a\n1\n"


def test_create_failure(tmp_path):
    with pytest.raises(FileCreateError) as exc:
        write_csv(tmp_path / "missing-dir" / "out.csv", ["a"], [])
    assert exc.value.stage == "create"


def test_record_failure_leaves_partial_file(tmp_path):
    out = tmp_path / "out.csv"
    with pytest.raises(WriteError) as exc:
        write_csv(out, ["a"], [["1"], 5])
    assert exc.value.stage == "write"
    assert out.read_text(encoding="utf-8-sig") == "a\n1\n"


class _CloseFails(io.StringIO):
    def close(self):
        super().close()
        raise OSError("no space left on device")


def test_close_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(Path, "open", lambda self, *a, **kw: _CloseFails())
    with pytest.raises(WriteError) as exc:
        write_csv(tmp_path / "out.csv", ["a"], [["1"]])
    assert exc.value.stage == "write"
    assert "close" in str(exc.value)
