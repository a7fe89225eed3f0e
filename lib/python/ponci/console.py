"""Ponci module main entry point.
"""

import logging

import click

from ponci import cli
from ponci import logging as pl


@click.group(cls=cli.make_commands(cli.COMMANDS))
@click.option('--root', required=False,
              help='Cgroup mount point, overrides $PONCI_PATH.')
@click.option('--flat/--separate', default=False, envvar='PONCI_FLAT',
              help='All subsystems are mounted in a single directory.')
@click.option('--poll-interval', type=float, default=0,
              envvar='PONCI_POLL_INTERVAL',
              help='Seconds between two polls of a control file.')
@click.option('--max-attempts', type=int, default=None,
              envvar='PONCI_MAX_ATTEMPTS',
              help='Give up waiting after that many polls.')
@click.option('--debug/--no-debug',
              help='Sets logging level to debug',
              is_flag=True, default=False)
@click.pass_context
def run(ctx, root, flat, poll_interval, max_attempts, debug):
    """Poor man's cgroups interface."""
    ctx.obj = {}
    ctx.obj['logging.debug'] = False

    # Default logging to cli.json, at WARNING, unless --debug
    cli.init_logger('cli.json')
    if debug:
        ctx.obj['logging.debug'] = True
        pl.set_log_level(logging.DEBUG)

    ctx.obj['config'] = cli.make_config(root, flat, poll_interval,
                                        max_attempts)
