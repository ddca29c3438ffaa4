"""Command-line entry point: ``ocf-haproxy ACTION``."""

import importlib.metadata
import os
from typing import Annotated

import typer

from .agent import Action, run_action, usage_text
from .codes import OcfResult, exit_code
from .config import AgentConfig
from .log import setup_logging
from .output import print_error, print_plain

PACKAGE_NAME = "ocf-haproxy"


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is passed."""
    if value:
        print_plain(f"{PACKAGE_NAME}: {importlib.metadata.version(PACKAGE_NAME)}")
        raise typer.Exit


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


# extra arguments and unknown options reach the command so they can be reported as unimplemented
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def agent_command(
    ctx: typer.Context,
    action: Annotated[str | None, typer.Argument(help=f"One of: {', '.join(Action)}.", show_default=False)] = None,
    _version: Annotated[
        bool | None, typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit.")
    ] = None,
) -> None:
    """OCF resource agent for HAProxy."""
    env = os.environ
    prog = ctx.find_root().info_name or "haproxy"

    selected = Action.parse(action)
    if selected is None or ctx.args:
        print_error(usage_text(prog))
        raise typer.Exit(exit_code(OcfResult.ERR_UNIMPLEMENTED, env))

    setup_logging(env)
    config = AgentConfig.resolve(env)
    result = run_action(selected, config, prog=prog)
    raise typer.Exit(exit_code(result, env))


if __name__ == "__main__":
    app()
