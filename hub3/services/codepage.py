"""
Text collaborators of the document decoder: code page decoding and line splitting.
"""
import re
from typing import List

DEFAULT_CODEPAGE = "cp1250"

LINE_TERMINATOR = re.compile(r"\r?\n")


def decode_bytes(buffer: bytes, codepage: str = DEFAULT_CODEPAGE) -> str:
    """
    Decode a report buffer from its legacy single-byte code page.

    Bytes with no mapping in the code page decode to U+FFFD, one character
    per byte, so fixed field offsets stay intact.

    Raises:
        LookupError: if the code page is unknown.
    """
    return bytes(buffer).decode(codepage, errors="replace")


def split_lines(text: str) -> List[str]:
    """
    Split report text on ``\\n`` or ``\\r\\n``.

    The empty segment after a final terminator is dropped. Text without a final
    terminator keeps its last line. Blank lines anywhere else are kept.
    """
    if not text:
        return []
    lines = LINE_TERMINATOR.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
