"""ghwatch monitor — projection and terminal rendering of the latest poll.

Modules
-------
projection
    ``WatchProjection`` dedupes a ``WatchState`` and produces a
    ``WatchSnapshot`` of display rows (truncated text, relative times,
    status labels).
renderer
    ``WatchRenderer`` turns ``WatchSnapshot`` into a Rich table, including
    the continuous ``Rich.Live`` mode.
keys
    ``KeyReader`` — non-blocking single-key input for the quit command.
"""
