"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from jsxparse.cli import build_parser, load_config, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"format": "json"}

    def test_auto_discover_jsxparse_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "jsxparse.toml"
        cfg.write_text("[output]\nindent = 4\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"indent": 4}


class TestConfigMerge:
    def _resolve(self, tmp_path: Path, *extra: str):
        src = tmp_path / "view.jsx"
        src.write_text("")
        p = build_parser()
        ns = p.parse_args([str(src), *extra])
        return resolve_options(ns)

    def test_defaults(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path)
        assert opts.format == "tree"
        assert opts.indent == 2
        assert opts.output_file is None

    def test_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "jsxparse.toml").write_text('[output]\nformat = "tokens"\n')
        assert self._resolve(tmp_path).format == "tokens"

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "jsxparse.toml").write_text('[output]\nformat = "tokens"\nindent = 8\n')
        opts = self._resolve(tmp_path, "--json", "--indent", "0")
        assert opts.format == "json"
        assert opts.indent == 0

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        assert self._resolve(tmp_path, "--config", str(cfg)).format == "json"

    def test_invalid_format_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "jsxparse.toml").write_text('[output]\nformat = "yaml"\n')
        with pytest.raises(argparse.ArgumentTypeError, match="invalid output format"):
            self._resolve(tmp_path)

    def test_invalid_toml_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "jsxparse.toml").write_text("[output\n")
        with pytest.raises(argparse.ArgumentTypeError, match="invalid config file"):
            self._resolve(tmp_path)
