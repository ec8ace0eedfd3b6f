"""
Command-line driver: decode a HUB3 report and print its records as JSON.

Usage:
    hub3-parse reports/1110779471-20200826.mn
    cat report.mn | hub3-parse - --indent 0
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from hub3.config import get_settings
from hub3.exceptions import is_hub3_error
from hub3.logging_config import configure_logging
from hub3.services.document_decoder import DocumentDecoder


def _read_buffer(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()

    p = argparse.ArgumentParser(prog="hub3-parse", description="Decode a HUB3 bank statement report.")
    p.add_argument("path", help="Report file path or '-' for stdin")
    p.add_argument("--encoding", default=settings.encoding, help="Report code page (default: %(default)s)")
    p.add_argument("--indent", type=int, default=2, help="JSON indentation, 0 for one line")
    args = p.parse_args(argv)

    configure_logging(settings.log_level, settings.log_json)

    buffer = _read_buffer(args.path)
    try:
        records = DocumentDecoder(encoding=args.encoding).decode(buffer)
    except Exception as err:
        if not is_hub3_error(err):
            raise
        sys.stderr.write(f"Failed to parse report: {err}\n")
        return 1

    json.dump(records, sys.stdout, ensure_ascii=False, indent=args.indent or None)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
