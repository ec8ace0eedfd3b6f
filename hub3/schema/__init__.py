"""Record layouts and field decoding rules."""
from hub3.schema.fields import FieldKind, FieldSpec, FieldValue
from hub3.schema.registry import (
    FORMAT_REGISTRY,
    LINE_LENGTH,
    RECORD_COUNT_FIELD,
    RECORD_TYPE_FIELD,
    FormatRegistry,
    RecordSchema,
    RecordType,
)

__all__ = [
    "FieldKind",
    "FieldSpec",
    "FieldValue",
    "FORMAT_REGISTRY",
    "LINE_LENGTH",
    "RECORD_COUNT_FIELD",
    "RECORD_TYPE_FIELD",
    "FormatRegistry",
    "RecordSchema",
    "RecordType",
]
