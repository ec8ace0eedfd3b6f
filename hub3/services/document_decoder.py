"""
Document decoder for HUB3 bank statement reports.

Turns a whole report buffer into one record per line:

1. decode the buffer from its code page
2. split it into lines
3. pick each line's layout from its trailing record type code
4. decode the line and check the closing summary's record count
"""
from collections import Counter
from functools import lru_cache
from typing import List, Optional

from hub3.config import get_settings
from hub3.exceptions import (
    HUB3Error,
    RecordCountMismatchError,
    UnknownRecordTypeError,
)
from hub3.logging_config import get_logger
from hub3.schema.registry import (
    FORMAT_REGISTRY,
    RECORD_COUNT_FIELD,
    RECORD_TYPE_FIELD,
    RECORD_TYPE_LENGTH,
    FormatRegistry,
    RecordType,
)
from hub3.services.codepage import decode_bytes, split_lines
from hub3.services.line_decoder import LineDecoder, LineRecord

logger = get_logger(__name__)

Document = List[LineRecord]


class DocumentDecoder:
    """
    Decodes complete HUB3 reports.

    The decoder holds no per-call state, so one instance can be shared
    between threads. A call either returns every record or raises the
    first error found.
    """

    def __init__(
        self,
        registry: FormatRegistry = FORMAT_REGISTRY,
        encoding: Optional[str] = None,
    ):
        self.registry = registry
        self.encoding = encoding or get_settings().encoding
        self._line_decoder = LineDecoder()

    def decode(self, buffer: bytes) -> Document:
        """
        Decode a report buffer.

        Args:
            buffer: Entire report file contents.

        Returns:
            One record per line, in line order.

        Raises:
            UnknownRecordTypeError: if a line ends with an unregistered code.
            LineLengthMismatchError: if a line is not as long as its layout.
            RecordCountMismatchError: if the closing summary count is not its line number.
            InvalidFieldValueError: if a numeric field does not hold an integer.
        """
        logger.debug("document_decode_started", bytes=len(buffer), encoding=self.encoding)

        try:
            records = self.decode_lines(split_lines(decode_bytes(buffer, self.encoding)))
        except HUB3Error as e:
            logger.warning(
                "document_decode_failed",
                error_code=e.error_code,
                error=e.message,
                **e.details,
            )
            raise

        logger.info(
            "document_decoded",
            lines=len(records),
            record_types=dict(Counter(str(r[RECORD_TYPE_FIELD]) for r in records)),
        )
        return records

    def decode_lines(self, lines: List[str]) -> Document:
        """Decode already split report lines."""
        records: Document = []

        for line_number, line in enumerate(lines, start=1):
            code = line[-RECORD_TYPE_LENGTH:]
            schema = self.registry.lookup(code)
            if schema is None:
                raise UnknownRecordTypeError(code, line_number)

            record = self._line_decoder.decode(schema, line, line_number)

            if schema.record_type == RecordType.CLOSING_SUMMARY:
                declared = record[RECORD_COUNT_FIELD]
                if declared != line_number:
                    raise RecordCountMismatchError(expected=declared, actual=line_number)

            records.append(record)

        return records


@lru_cache
def get_document_decoder() -> DocumentDecoder:
    """Get cached DocumentDecoder using the configured encoding."""
    return DocumentDecoder()


def parse(buffer: bytes, encoding: Optional[str] = None) -> Document:
    """
    Parse a HUB3 bank report.

    Example::

        from hub3 import is_hub3_error, parse

        try:
            records = parse(Path("1110779471-20200826.mn").read_bytes())
        except Exception as err:
            if not is_hub3_error(err):
                raise
            print("Failed to parse report:", err)
    """
    decoder = DocumentDecoder(encoding=encoding) if encoding else get_document_decoder()
    return decoder.decode(buffer)
