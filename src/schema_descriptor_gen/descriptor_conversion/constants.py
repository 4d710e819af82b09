"""Fixed descriptor tokens."""

from __future__ import annotations

INT32 = '"INT32"'
INT64 = '"INT64"'
DOUBLE = '"DOUBLE"'
STRING = '"STRING"'
DATE = '"DATE"'
DATETIME = '"DATETIME"'
BINARY = '"BINARY"'
BOOLEAN = '"BOOLEAN"'
JSON = '"JSON"'
FREE_FORM_MAP = '"MAP(STRING,STRING)"'

INTEGER_FORMAT_TOKENS: dict[str, str] = {"int32": INT32, "int64": INT64}
STRING_FORMAT_TOKENS: dict[str, str] = {
    "date": DATE,
    "date-time": DATETIME,
    "byte": BINARY,
    "binary": BINARY,
}
