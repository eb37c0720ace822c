"""Encode values as canonical JSON and decode JSON onto a target type.

Decoding works like attaching a prototype: the parsed fields are copied
onto a fresh instance of the target class without running ``__init__``,
so the result carries the class's methods and exactly the data that was
in the document. Extra fields are kept and missing fields stay missing.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objtasks.codec.config import CodecConfig

__all__ = ["encode", "decode"]

log = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_CONFIG = CodecConfig()


def _own_fields(obj: Any) -> dict[str, Any]:
    """Return the data fields of a dataclass instance, methods excluded."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        if hasattr(obj, "__dict__"):
            return dict(vars(obj))
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: Any, config: CodecConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Cyclic references, NaN and infinite floats raise ``ValueError``;
    unsupported members raise ``TypeError``. All come straight from :mod:`json`.
    """
    cfg = config or _DEFAULT_CONFIG
    return json.dumps(
        value,
        default=_own_fields,
        allow_nan=False,
        indent=cfg.indent,
        sort_keys=cfg.sort_keys,
        ensure_ascii=cfg.ensure_ascii,
        separators=cfg.separators,
    )


def decode(proto: type[T], text: str) -> T:
    """Parse *text* and copy its fields onto a new instance of *proto*.

    Raises ``json.JSONDecodeError`` for malformed text, including the
    non-standard ``NaN``/``Infinity`` literals, and ``TypeError`` when the
    document's top level is not a JSON object.

    Fields absent from the document are absent from the instance, so a
    dataclass decoded from partial data cannot be compared or repr'd until
    they are set.
    """

    def reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid JSON literal {name!r}", text, text.find(name))

    data = json.loads(text, parse_constant=reject_constant)
    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot decode a JSON {type(data).__name__} onto {proto.__name__}: "
            "expected an object"
        )

    obj = proto.__new__(proto)
    vars(obj).update(data)

    log.debug("Decoded %d field(s) onto %s", len(data), proto.__name__)
    return obj
