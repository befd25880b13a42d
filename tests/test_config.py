"""Tests for config parsing (reqconv._config)."""

from __future__ import annotations

from pathlib import Path

import pytest

from reqconv import ChainConfig, ConfigParseError, TypedConfig, load_chain_config, parse_chain_config


class TestParseChainConfig:
    def test_single_converter(self) -> None:
        data = {"converters": [{"type_url": "reqconv.http.v1.ByteArrayRequestConverter"}]}
        config = parse_chain_config(data)
        assert config == ChainConfig(
            converters=(TypedConfig(type_url="reqconv.http.v1.ByteArrayRequestConverter"),)
        )

    def test_preserves_order_and_payload(self) -> None:
        data = {
            "converters": [
                {"type_url": "b", "config": {"value": "x"}},
                {"type_url": "a"},
            ]
        }
        config = parse_chain_config(data)
        assert [c.type_url for c in config.converters] == ["b", "a"]
        assert config.converters[0].config == {"value": "x"}
        assert config.converters[1].config == {}

    def test_null_config_is_empty(self) -> None:
        config = parse_chain_config({"converters": [{"type_url": "a", "config": None}]})
        assert config.converters[0].config == {}

    def test_empty_list(self) -> None:
        assert parse_chain_config({"converters": []}).converters == ()

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ([], "expected dict"),
            ({}, "missing required field 'converters'"),
            ({"converters": {}}, "'converters' must be a list"),
            ({"converters": ["x"]}, "converter entry must be a dict"),
            ({"converters": [{}]}, "missing required field 'type_url'"),
            ({"converters": [{"type_url": 3}]}, "type_url must be a string"),
            ({"converters": [{"type_url": "a", "config": []}]}, "config must be a dict"),
        ],
    )
    def test_malformed(self, data: object, message: str) -> None:
        with pytest.raises(ConfigParseError, match=message):
            parse_chain_config(data)  # type: ignore[arg-type]


class TestLoadChainConfig:
    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "converters.yaml"
        path.write_text(
            "converters:\n"
            "  - type_url: reqconv.http.v1.ByteArrayRequestConverter\n"
            "    config: {}\n"
        )
        config = load_chain_config(path)
        assert config.converters[0].type_url == "reqconv.http.v1.ByteArrayRequestConverter"

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "converters.json"
        path.write_text('{"converters": [{"type_url": "a"}]}')
        assert load_chain_config(str(path)).converters[0].type_url == "a"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("converters: [unclosed\n")
        with pytest.raises(ConfigParseError, match="invalid YAML"):
            load_chain_config(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigParseError, match="expected dict"):
            load_chain_config(path)
