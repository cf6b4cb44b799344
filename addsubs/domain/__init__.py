"""
This package contains the core domain models of addsubs.

Modules:
    exceptions.py: The exception hierarchy. Batch-fatal errors are raised
                   before anything is dispatched; task-scoped errors are
                   captured per pair.
    languages.py: The closed table of supported subtitle languages.
    pairing.py: Filename classification and the `PairSet` model.
"""
