"""
Shared utilities for resumekit.

Common functionality used across contexts:
- Logger setup with provenance
- Export event log
- Timestamps
- Text extraction from generated documents
"""

from resumekit.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
