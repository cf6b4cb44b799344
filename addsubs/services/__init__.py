"""
Services Package for addsubs.

- **File Pairing Service (`FilePairing`, `pair`):** scans a directory and pairs
  video and subtitle files by sorted position.
- **Confirmation Service (`confirm`):** shows the pairing and blocks for the
  operator's Y/n answer.
- **Task Builder (`MuxTask`, `build_tasks`):** turns each pair into the
  mkvmerge (and optional ffs) invocation.
- **Logging Service (`BatchReport`):** writes the optional YAML report.
"""
