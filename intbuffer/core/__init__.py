"""Core Layer — pure buffer logic, no config, no async.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/, or config
      (buffer_snapshot is the one exception: it validates through schemas/)
    - Only side effect permitted is DEBUG logging

Design Decisions:
    - Functional core separated from imperative shell: settings are applied by services/
"""
