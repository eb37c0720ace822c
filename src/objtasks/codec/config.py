from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Output options for :func:`objtasks.codec.encode`.

    The defaults give the canonical compact form: no whitespace between
    tokens, keys in insertion order, non-ASCII characters left as-is.
    """

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    @property
    def separators(self) -> tuple[str, str]:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")
