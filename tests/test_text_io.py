import io

import pytest

from utils.text_io import (
    AlphabetError,
    SequenceFileError,
    parse_sequence,
    read_sequence_file,
    read_uploaded_sequences,
)

def test_parse_drops_newlines():
    assert parse_sequence("acgt\nac\r\ngt\n") == "acgtacgt"
    assert parse_sequence("") == ""

def test_parse_rejects_foreign_symbols():
    with pytest.raises(AlphabetError, match="a,c,g,t") as exc:
        parse_sequence("acgn", "seq.txt")
    assert exc.value.char == "n"
    assert exc.value.position == 3
    with pytest.raises(AlphabetError):
        parse_sequence("ACGT")
    with pytest.raises(AlphabetError):
        parse_sequence("ac gt")

def test_read_sequence_file(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_text("acgt\nacgt\n")
    assert read_sequence_file(f) == "acgtacgt"

def test_read_missing_file(tmp_path):
    with pytest.raises(SequenceFileError, match="unable to open"):
        read_sequence_file(tmp_path / "nope.txt")

def test_read_non_ascii_file(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_bytes(b"ac\xffgt")
    with pytest.raises(AlphabetError):
        read_sequence_file(f)

def test_read_uploaded_sequences():
    a = io.BytesIO(b"acgt\n")
    a.name = "a.txt"
    b = io.BytesIO(b"gg")
    seqs, names = read_uploaded_sequences([a, b])
    assert seqs == ["acgt", "gg"]
    assert names == ["a.txt", "uploaded.txt"]
    assert read_uploaded_sequences(None) == ([], [])
