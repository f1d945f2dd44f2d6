"""Word data enrichment pipeline for the vocabulary dataset.

This package contains the offline batch that improves vocabulary entries:
- API helpers for the dictionary and translation services
- A request pacer that keeps external calls under the upstream quotas
- The per-entry field improver and the batch orchestrator
- Backup and improved-dataset writers
"""

__all__ = ["api_helpers", "programmatic", "utils"]
