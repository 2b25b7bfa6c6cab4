"""Tests for Elasticsearch config parsing and validation."""

from __future__ import annotations

import pytest

from elasticlog.adapters.base.exceptions import ConfigError
from elasticlog.config.elastic import DEFAULT_INDEX_PATTERN, parse_config


class TestParseConfig:
    def test_full_config(self) -> None:
        cfg = parse_config(
            {
                "addresses": ["http://a:9200", "http://b:9200"],
                "username": "elastic",
                "password": "changeme",
                "apiKey": "key",
                "cloudID": "deploy:abc",
                "indexPattern": "app-logs-*",
            }
        )
        assert cfg.addresses == ["http://a:9200", "http://b:9200"]
        assert cfg.username == "elastic"
        assert cfg.password == "changeme"
        assert cfg.api_key == "key"
        assert cfg.cloud_id == "deploy:abc"
        assert cfg.index_pattern == "app-logs-*"

    def test_non_string_addresses_skipped(self) -> None:
        cfg = parse_config({"addresses": ["http://a:9200", 9200, None, {"url": "x"}, "http://b:9200"]})
        assert cfg.addresses == ["http://a:9200", "http://b:9200"]

    def test_addresses_not_a_list(self) -> None:
        assert parse_config({"addresses": "http://a:9200"}).addresses == []

    def test_non_string_optionals_ignored(self) -> None:
        cfg = parse_config({"addresses": ["http://a:9200"], "username": 42, "apiKey": ["k"]})
        assert cfg.username == ""
        assert cfg.api_key == ""

    @pytest.mark.parametrize("raw", [{}, {"indexPattern": ""}, {"indexPattern": None}])
    def test_default_index_pattern(self, raw: dict) -> None:
        assert parse_config(raw).index_pattern == DEFAULT_INDEX_PATTERN == "logs-*"

    def test_none_config(self) -> None:
        assert parse_config(None).addresses == []

    def test_repr_hides_secrets(self) -> None:
        cfg = parse_config({"addresses": ["http://a:9200"], "password": "s3cret", "apiKey": "topsecret"})
        assert "s3cret" not in repr(cfg)
        assert "topsecret" not in repr(cfg)


class TestValidateConnection:
    @pytest.mark.parametrize("raw", [{}, {"addresses": []}, {"cloudID": ""}, {"username": "u", "password": "p"}])
    def test_no_connection_rejected(self, raw: dict) -> None:
        with pytest.raises(ConfigError, match="addresses"):
            parse_config(raw).validate_connection()

    @pytest.mark.parametrize(
        "raw",
        [
            {"addresses": ["http://a:9200"]},
            {"cloudID": "deploy:abc"},
            {"addresses": ["http://a:9200"], "apiKey": "k", "username": "u", "password": "p"},
        ],
    )
    def test_connection_accepted(self, raw: dict) -> None:
        parse_config(raw).validate_connection()
