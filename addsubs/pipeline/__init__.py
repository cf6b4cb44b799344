"""
This package contains the multiplexing pipeline.

The pipeline orchestrates a whole batch: it discovers and pairs files, waits
for the operator's confirmation, and runs one concurrent task per pair.
"""
