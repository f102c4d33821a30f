#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import paper as paper_command, render as render_command


def register(app: typer.Typer) -> None:
    render_command.register(app)
    paper_command.register(app)
