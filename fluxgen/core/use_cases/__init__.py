"""Use cases — the invocation entry points called by the CLI or a host build."""
