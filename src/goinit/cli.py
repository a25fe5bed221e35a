"""Click entry point for go-init."""

import os
import sys

import click

from goinit.scaffold.git_client import GitClient
from goinit.scaffold.go_toolchain import GoToolchain
from goinit.scaffold.scaffold_opts import ScaffoldOpts
from goinit.scaffold.scaffolder import Scaffolder

USAGE = "Usage: go-init project-name [--rest-api]"

_RAW_ARGS = "goinit.raw_args"


class RawArgsCommand(click.Command):
    """Command that keeps the arguments exactly as given.

    Click's parser drops a ``--`` separator; go-init treats it as an
    ordinary argument, so the callback reads the unparsed list instead.
    """

    def parse_args(self, ctx, args):
        ctx.meta[_RAW_ARGS] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, args):
    """go-init - create a new Go project with module, layout and Git repository."""
    raw_args = ctx.meta[_RAW_ARGS]
    if not raw_args:
        click.echo("Error: Please provide a project name.", err=True)
        click.echo(USAGE, err=True)
        sys.exit(1)

    opts = ScaffoldOpts.from_args(raw_args[0], raw_args[1:], base_dir=os.getcwd())
    scaffolder = Scaffolder(GoToolchain(), GitClient())
    scaffolder.run(opts.to_request())
