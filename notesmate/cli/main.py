"""Main CLI application using Cyclopts.

Operational commands only: running the server and preparing credentials.
All tenant and employee administration goes through the REST API.
"""

import cyclopts

from notesmate.cli.commands import password, server

app = cyclopts.App(
    name="notesmate",
    help="NotesMate - authentication and tenancy service",
)

app.command(server.app, name="server")
app.command(password.app, name="password")
