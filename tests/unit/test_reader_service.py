# tests/unit/test_reader_service.py
import gzip
import io
from pathlib import Path

import pytest

from linegroup.adapters.source.local_source import LocalSource
from linegroup.domain.errors import SourceNotFoundError
from linegroup.services.reader_service import RecordReaderService


def _parse(text: str, compressed: bool = False):
    data = text.encode("utf-8")
    if compressed:
        data = gzip.compress(data)
    return RecordReaderService(LocalSource()).parse_stream(
        io.BytesIO(data), compressed=compressed
    )


def test_parses_semicolon_rows():
    assert _parse("A;1\nB;1\nC;2\nD;3\n") == [
        ("A", "1"),
        ("B", "1"),
        ("C", "2"),
        ("D", "3"),
    ]


def test_blank_lines_are_ignored_and_fields_trimmed():
    rows = _parse("  A ; 1 \n\n\nB;2\n")
    assert rows == [("A", "1"), ("B", "2")]


def test_duplicate_line_keeps_first_occurrence():
    rows = _parse("A;1\nB;2\nA;1\n A;1\n")
    assert rows == [("A", "1"), ("B", "2")]


def test_unbalanced_quote_drops_row():
    rows = _parse('foo;"bar\nbaz;1\n')
    assert rows == [("baz", "1")]


def test_quote_inside_field_drops_row():
    assert _parse('a"b;1\n') == []


def test_quoted_fields_are_unquoted():
    rows = _parse('"1";"2"\n1;2\n"a";"";"b"\n')
    # "1";"2" and 1;2 are the same row; "" is an empty field
    assert rows == [("1", "2"), ("a", "", "b")]


def test_trailing_delimiter_keeps_empty_column():
    assert _parse("A;1;\n") == [("A", "1", "")]


def test_crlf_line_endings():
    assert _parse("A;1\r\nB;1\r\n") == [("A", "1"), ("B", "1")]


def test_compressed_stream_matches_plain():
    text = 'A;1\nB;1\nA;1\nC;"x\n'
    assert _parse(text, compressed=True) == _parse(text) == [("A", "1"), ("B", "1")]


def test_parse_stream_leaves_stream_open():
    stream = io.BytesIO(b"A;1\n")
    RecordReaderService(LocalSource()).parse_stream(stream)
    assert not stream.closed


def test_read_detects_gzip_by_suffix(tmp_path: Path):
    gz = tmp_path / "rows.txt.gz"
    gz.write_bytes(gzip.compress(b"A;1\nB;1\n"))

    reader = RecordReaderService(LocalSource())
    assert reader.is_compressed(str(gz))
    assert not reader.is_compressed("rows.txt")
    assert reader.read(str(gz)) == [("A", "1"), ("B", "1")]


def test_read_missing_file_raises(tmp_path: Path):
    missing = tmp_path / "nope.txt"
    reader = RecordReaderService(LocalSource())
    with pytest.raises(SourceNotFoundError) as exc:
        reader.read(str(missing))
    assert isinstance(exc.value, FileNotFoundError)
    assert str(missing) in str(exc.value)


def test_quoted_delimiter_stays_in_one_field():
    rows = _parse('"2;3";x\n"2;3";y\n')
    assert rows == [("2;3", "x"), ("2;3", "y")]


def test_escaped_quote_inside_value_drops_row():
    # "a""b" unescapes to a"b, which is not bracketed by quotes
    assert _parse('"a""b";1\nc;1\n') == [("c", "1")]


def test_value_wrapped_in_escaped_quotes_is_kept():
    assert _parse('"""x""";1\n') == [('"x"', "1")]


def test_text_after_closing_quote_drops_row():
    assert _parse('"bad;"1200"\nok;1\n') == [("ok", "1")]


def test_invalid_utf8_is_replaced():
    rows = RecordReaderService(LocalSource()).parse_stream(io.BytesIO(b"A;1\n\xff\xfe;1\n"))
    assert rows == [("A", "1"), ("\ufffd\ufffd", "1")]


def test_very_long_field_is_parsed():
    long_value = "v" * 200_000
    assert _parse(f"{long_value};1\n") == [(long_value, "1")]
