"""
maid-ingest: batch ingestion of agency-submitted maid profiles.

Validates untrusted profile rows one by one, persists the valid ones and
returns a per-row accounting of what succeeded and what failed.
"""

__version__ = "0.1.0"
