"""Log provider layer — Pluggable connectors that answer canonical log queries.

Built-in providers:
  - elastic: Elasticsearch v8+ (query DSL over ``logs-*`` style index patterns)

Implement ``LogProvider`` and register a constructor in a
``ProviderRegistry`` to serve another backend.
"""
