"""Move tasks into a cgroup.
"""

import click

from ponci import cgutils
from ponci import cli


def init():
    """Return top level command handler."""

    @click.command(name='add-task')
    @click.argument('group')
    @click.argument('tids', type=int, nargs=-1, required=True)
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def add_task(obj, group, tids):
        """Move task(s) into the cgroup."""
        for tid in tids:
            cgutils.add_task(obj['config'], group, tid)

    return add_task
