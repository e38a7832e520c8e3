"""mdreflink API: Markdown collaborator, link transformation core and commands."""
