"""Table ingestion layer.

This module reads delimited event tables into raw header-keyed records.
It hands records to the transform layer without interpreting cells.
"""
