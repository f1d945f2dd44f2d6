"""Programmatic enrichment: configuration, field improver, orchestrator and writer."""
