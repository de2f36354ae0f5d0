"""
sources/csv_text.py - Quoted-field tokenizer for spreadsheet exports.

Google Sheets exports use comma separators, double-quote escaping and
either LF or CRLF line endings. Quoted fields may span lines.

Usage:
    from helpshelf_pipeline.sources.csv_text import tokenize

    rows = tokenize(path.read_text(encoding="utf-8"))
    header, body = rows[0], rows[1:]
"""

from __future__ import annotations


def _has_content(row: list[str]) -> bool:
    return any(field.strip() for field in row)


def tokenize(text: str) -> list[list[str]]:
    """
    Split CSV text into rows of raw field strings.

    Rules:
    - ``"`` toggles quoted mode; ``""`` inside quotes is a literal quote
    - an unquoted ``,`` ends a field
    - an unquoted ``\\n`` or ``\\r\\n`` ends a row; a lone ``\\r`` is content
    - rows whose fields are all blank are dropped

    Field values are not trimmed.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    def end_row() -> None:
        nonlocal row, field
        row.append("".join(field))
        if _has_content(row):
            rows.append(row)
        row = []
        field = []

    while i < n:
        char = text[i]
        next_char = text[i + 1] if i + 1 < n else ""

        if char == '"':
            if in_quotes and next_char == '"':
                field.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif in_quotes:
            field.append(char)
        elif char == ",":
            row.append("".join(field))
            field = []
        elif char == "\n":
            end_row()
        elif char == "\r" and next_char == "\n":
            end_row()
            i += 1
        else:
            field.append(char)
        i += 1

    # Final row without a trailing newline
    if field or row:
        end_row()

    return rows
