"""
Logging and metrics for maid-ingest.
"""
