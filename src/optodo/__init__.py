"""
Operational To-Dos.

Components:
- tasks/: Task model, in-memory TaskStore, EditSession, input-boundary helpers
- notifications/: transient notice slot with cancellable auto-clear timers
- render/: plain-text board rendering
- connectors/: interactive console loop
- cli/: entrypoint, bootstrap (composition root), slash commands
"""
