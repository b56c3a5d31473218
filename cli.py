#!/usr/bin/env python3
"""dbnum CLI entry point.

This mounts every subcommand listed in dbnum.TOOL_COMMANDS using Typer.

Subcommands:
    - convert: render a number as [DBNum1]-[DBNum4] text

Examples:
    py cli.py convert 1005                 # table of all four styles
    py cli.py convert -s dbnum1 10010      # 一万〇一十
    py cli.py convert -s dbnum1 -o 12      # 一十二
    py cli.py convert -s dbnum3 -f 102.3   # 壹零贰.叁
    py cli.py convert -s dbnum2 -- -5.25   # 负伍.贰伍
"""

import typer

from dbnum import TOOL_COMMANDS


# Root Typer app; expose -h/--help on all levels
app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})

# Mount sub-apps under their command names. With invoke_without_command=True,
# running, e.g., `py cli.py convert 12` executes convert's default callback.
for command in TOOL_COMMANDS:
    app.add_typer(command.app, name=command.name, invoke_without_command=command.invoke_without_command)


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
