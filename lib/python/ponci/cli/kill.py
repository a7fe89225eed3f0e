"""Terminate all tasks of a cgroup and delete it.
"""

import click

from ponci import cli
from ponci import terminate
from ponci import utils


def _signal_opt(ctx, param, value):
    """Convert the --signal option to a signal."""
    try:
        return utils.parse_signal(value)
    except ValueError as err:
        raise click.BadParameter(str(err), ctx=ctx, param=param)


def init():
    """Return top level command handler."""

    @click.command()
    @click.option('--signal', 'sig', default='TERM', callback=_signal_opt,
                  help='Signal sent to the tasks (name or number).')
    @click.argument('group')
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def kill(obj, sig, group):
        """Kill all tasks of the cgroup, wait for it to empty, delete it."""
        terminate.kill(obj['config'], group, sig=sig)

    return kill
