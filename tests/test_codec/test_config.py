from __future__ import annotations

import dataclasses

import pytest

from objtasks.codec import CodecConfig


class TestCodecConfig:
    def test_default_values(self) -> None:
        cfg = CodecConfig()
        assert cfg.indent is None
        assert cfg.sort_keys is False
        assert cfg.ensure_ascii is False

    def test_compact_separators_without_indent(self) -> None:
        assert CodecConfig().separators == (",", ":")

    def test_spaced_separators_with_indent(self) -> None:
        assert CodecConfig(indent=2).separators == (",", ": ")

    def test_frozen(self) -> None:
        cfg = CodecConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.indent = 4  # type: ignore[misc]
