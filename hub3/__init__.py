"""
HUB3 - decoder for fixed-width bank statement reports.

Reports are plain text in the cp1250 code page, one 1000-character record
per line. Each line ends with a 3-digit record type code:

- 900 file header
- 903 statement header
- 905 transaction
- 907 statement footer and balances
- 909 closing batch summary (declares the total line count)
- 999 reserved
"""
import logging

from hub3.exceptions import (
    HUB3Error,
    InvalidFieldValueError,
    LineLengthMismatchError,
    RecordCountMismatchError,
    UnknownRecordTypeError,
    is_hub3_error,
)
from hub3.schema import FORMAT_REGISTRY, RecordSchema, RecordType
from hub3.services import Document, DocumentDecoder, LineDecoder, LineRecord, parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "parse",
    "DocumentDecoder",
    "LineDecoder",
    "Document",
    "LineRecord",
    "FORMAT_REGISTRY",
    "RecordSchema",
    "RecordType",
    "HUB3Error",
    "InvalidFieldValueError",
    "LineLengthMismatchError",
    "RecordCountMismatchError",
    "UnknownRecordTypeError",
    "is_hub3_error",
]
