"""Elasticsearch log provider."""

from elasticlog.adapters.elasticsearch.adapter import PROVIDER_NAME, ElasticsearchProvider, new_provider
from elasticlog.adapters.elasticsearch.normalizer import normalize_hit
from elasticlog.adapters.elasticsearch.query_builder import build_filter_clause, build_query

__all__ = [
    "PROVIDER_NAME",
    "ElasticsearchProvider",
    "build_filter_clause",
    "build_query",
    "new_provider",
    "normalize_hit",
]
