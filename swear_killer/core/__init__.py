"""Core subtitle-to-interval pipeline.

WHY: The core package holds the only parts with real algorithmic content:
timestamp parsing, block scanning, term matching, interval extraction and
merging. Everything here is synchronous and free of I/O except for the
single subtitle read in extractor.find_mute_intervals.

HOW: ir.py defines the value types, timestamps.py/scanner.py/matcher.py
are the leaf stages, extractor.py combines them, merger.py coalesces the
result.

RULES:
- No module here reads ambient state or configuration beyond constants
- Stages communicate only through the ir.py value types
"""
