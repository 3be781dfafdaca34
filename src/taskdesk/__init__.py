"""
taskdesk: an in-memory task-list editor for the terminal.

Components:
- tasks/: task models, the in-memory store, the status view filter
- editing/: per-field editors, the inline edit session, the creation form
- cli/ + connectors/: command registry, rendering, console REPL
"""
