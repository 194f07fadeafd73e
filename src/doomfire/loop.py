import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from doomfire.cli.commands.record import record_command
from doomfire.cli.commands.run import run_command

app = typer.Typer(help="The PSX Doom fire effect.")

app.command(name="run")(run_command)
app.command(name="record")(record_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
