"""binstubs.template

The shell script written for every binstub.
"""

from __future__ import annotations

from .models import DEFAULT_GO_RUN, TemplateArgs

BINSTUB_TEMPLATE = """#!/bin/sh
# Code generated by binstubs. DO NOT EDIT.

exec {run_command} {module_path} "$@"
"""


def build_run_command(extra_args: str = "", *, go_run: str = DEFAULT_GO_RUN) -> str:
    """``go run`` followed by *extra_args* when there are any."""
    if extra_args:
        return f"{go_run} {extra_args}"
    return go_run


def render_binstub(args: TemplateArgs) -> str:
    return BINSTUB_TEMPLATE.format(run_command=args.run_command, module_path=args.module_path)
