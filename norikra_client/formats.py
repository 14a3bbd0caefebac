"""Per-line record codecs.

A codec turns one line of text into a record (``parse``) and one record into
one line of text (``format``). Records are plain dicts; key order is kept.

Supported formats:
    json  - one JSON object per line
    ltsv  - Labeled Tab-Separated Values (``label:value<TAB>label:value``)
"""

import json
from typing import Any, Literal, Protocol

from norikra_client.error import DecodeError

Record = dict[str, Any]

FormatName = Literal["json", "ltsv"]


class Codec(Protocol):
    """Converts between text lines and records."""

    name: str

    def parse(self, line: str) -> Record: ...

    def format(self, record: Record) -> str: ...


class JSONCodec:
    name = "json"

    def parse(self, line: str) -> Record:
        try:
            value = json.loads(line)
        except json.JSONDecodeError as e:
            raise DecodeError(f"malformed JSON: {e.msg}") from e
        if not isinstance(value, dict):
            raise DecodeError(f"expected a JSON object, got {type(value).__name__}")
        return value

    def format(self, record: Record) -> str:
        return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


class LTSVCodec:
    name = "ltsv"

    def parse(self, line: str) -> Record:
        record: Record = {}
        # Some producers end lines with a TAB; an empty line is still malformed
        for field in line.rstrip("\r\n").rstrip("\t").split("\t"):
            label, sep, value = field.partition(":")
            if not sep or not label:
                raise DecodeError(f"malformed LTSV field: {field!r}")
            record[label] = _unescape(value)
        return record

    def format(self, record: Record) -> str:
        return "\t".join(f"{label}:{_ltsv_value(value)}" for label, value in record.items())


def _ltsv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        value = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value).replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    out = []
    chars = iter(value)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        nxt = next(chars, "")
        out.append({"t": "\t", "n": "\n", "\\": "\\"}.get(nxt, "\\" + nxt))
    return "".join(out)


_CODECS: dict[str, type[JSONCodec] | type[LTSVCodec]] = {
    "json": JSONCodec,
    "ltsv": LTSVCodec,
}


def get_codec(name: str) -> Codec:
    """Return the codec registered under ``name``.

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        return _CODECS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown format: {name} (supported: {', '.join(sorted(_CODECS))})"
        ) from None
