"""
Line decoder: slices one report line into its fixed-width fields.
"""
from typing import Dict, Optional

from hub3.exceptions import InvalidFieldValueError, LineLengthMismatchError
from hub3.schema.fields import FieldValue, trim
from hub3.schema.registry import RecordSchema

LineRecord = Dict[str, FieldValue]


class LineDecoder:
    """
    Decodes a single line against a record layout.

    Offsets come from the layout alone: field ``n`` starts where field
    ``n - 1`` ends, whatever the line contains.
    """

    def decode(self, schema: RecordSchema, line: str, line_number: int) -> LineRecord:
        """
        Decode one line into a record keyed by field name.

        Args:
            schema: Layout selected by the line's record type code.
            line: Raw line text without its terminator.
            line_number: 1-based position of the line in the document.

        Returns:
            Mapping of field name to decoded value, in layout order.

        Raises:
            LineLengthMismatchError: if the layout does not consume exactly the line.
            InvalidFieldValueError: if a numeric field does not hold an integer.
        """
        record: LineRecord = {}
        invalid: Optional[InvalidFieldValueError] = None
        offset = 0

        for spec in schema.fields:
            raw = line[offset:offset + spec.length]
            try:
                record[spec.name] = spec.decode(raw)
            except ValueError:
                if invalid is None:
                    invalid = InvalidFieldValueError(spec.name, trim(raw), line_number)
                record[spec.name] = trim(raw)
            offset += spec.length

        # Length mismatch takes precedence over field value errors
        if offset != len(line):
            raise LineLengthMismatchError(offset, len(line), line_number)
        if invalid is not None:
            raise invalid

        return record

