import logging
from pathlib import Path
from typing import List, Tuple

from algorithms.errors import SequenceMatchError

logger = logging.getLogger(__name__)

ALPHABET = "acgt"
_IGNORED = "\r\n"


class SequenceInputError(SequenceMatchError):
    """Raised when a sequence cannot be loaded."""


class AlphabetError(SequenceInputError):
    def __init__(self, char: str, position: int, name: str = "<input>"):
        super().__init__(
            f"{name}: a dna sequence can only contain the characters a,c,g,t "
            f"(found {char!r} at position {position})"
        )
        self.char = char
        self.position = position
        self.name = name


class SequenceFileError(SequenceInputError):
    def __init__(self, path, reason: str = ""):
        message = f"unable to open {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = str(path)


def parse_sequence(text: str, name: str = "<input>") -> str:
    out = []
    for pos, ch in enumerate(text):
        if ch in _IGNORED:
            continue
        if ch not in ALPHABET:
            raise AlphabetError(ch, pos, name)
        out.append(ch)
    return "".join(out)


def read_sequence_file(path) -> str:
    path = Path(path)
    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as e:
        raise AlphabetError(chr(e.object[e.start]), e.start, str(path)) from e
    except OSError as e:
        raise SequenceFileError(path, e.strerror or str(e)) from e
    seq = parse_sequence(text, str(path))
    logger.debug("read %d symbols from %s", len(seq), path)
    return seq


def read_uploaded_sequences(files) -> Tuple[List[str], List[str]]:
    seqs, names = [], []
    if not files:
        return seqs, names
    for f in files:
        name = getattr(f, "name", "uploaded.txt")
        data = f.read()
        try:
            txt = data.decode("utf-8")
        except AttributeError:
            txt = str(data)
        except UnicodeDecodeError as e:
            raise AlphabetError(repr(data[e.start:e.start + 1]), e.start, name) from e
        seqs.append(parse_sequence(txt, name))
        names.append(name)
    return seqs, names
