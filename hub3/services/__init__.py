"""Decoding services."""
from hub3.services.document_decoder import Document, DocumentDecoder, get_document_decoder, parse
from hub3.services.line_decoder import LineDecoder, LineRecord

__all__ = [
    "Document",
    "DocumentDecoder",
    "LineDecoder",
    "LineRecord",
    "get_document_decoder",
    "parse",
]
