"""
Command Line Interface Package

Unified CLI for the net worth tracker.

Command Structure:
- networth: Main entry point with utility commands (version, config)
- networth add / edit / delete / list / stats: Entry management
- networth clear / undo: Bulk removal with single-level restore
- networth import / export: CSV interchange
- networth chart: Trend chart image
"""
