"""dbnum package: Chinese numeral and full-width renderings of numbers."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from . import convert
from .chinese import default_text, to_chinese_digits, to_chinese_numeral, to_full_width
from .glyphs import FORMAL, LOWERCASE, GlyphProfile
from .styles import NumeralStyle, render, render_all


@dataclass(frozen=True)
class ToolCommand:
    """Declarative CLI registration entry for a dbnum subcommand."""

    name: str
    app: typer.Typer
    invoke_without_command: bool = False


TOOL_COMMANDS: tuple[ToolCommand, ...] = (
    ToolCommand(name="convert", app=convert.app, invoke_without_command=True),
)


__all__ = [
    "convert",
    "default_text",
    "to_chinese_digits",
    "to_chinese_numeral",
    "to_full_width",
    "GlyphProfile",
    "LOWERCASE",
    "FORMAL",
    "NumeralStyle",
    "render",
    "render_all",
    "ToolCommand",
    "TOOL_COMMANDS",
]
