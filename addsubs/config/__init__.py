"""
Configuration Package for addsubs.

This package centralizes the static configuration settings for the application:
CLI defaults, the output folder name, the logging format, the process exit
codes, and the user-overridable paths of the external tools (mkvmerge, ffs)
read from `config.user.yaml`.
"""
