"""Single-user kanban board with a terminal UI and a scriptable CLI."""
