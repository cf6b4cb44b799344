"""
Utilities Package for addsubs.

Modules:
    - process_utils.py: Runs the external tools and turns a non-zero exit
      status into a `CommandFailedError`.
    - tool_checker.py: Verifies at startup that mkvmerge (and ffs, when
      syncing) can be executed.
"""
