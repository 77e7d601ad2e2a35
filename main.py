# Copyright (c) 2025 Trae AI. All rights reserved.

import typer
from sublink.cli.main import app as cli_app, main as cli_callback

app = typer.Typer(
    help="sublink - Expose external subtitles under media server names.\n\n"
    "Usage: sublink link DIR... (each DIR is a folder holding videos)"
)
app.callback()(cli_callback)

# Add CLI commands
app.registered_commands.extend(cli_app.registered_commands)

if __name__ == "__main__":
    app()
