"""List the tasks of a cgroup.
"""

import click

from ponci import cgutils
from ponci import cli


def init():
    """Return top level command handler."""

    @click.command()
    @click.option('--subsystem', default='cpuset',
                  type=click.Choice(['cpuset', 'freezer']),
                  help='Hierarchy to read the membership from.')
    @click.argument('group')
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def tasks(obj, subsystem, group):
        """List the task ids of the cgroup."""
        for tid in cgutils.tasks(obj['config'], group, subsystem):
            cli.out('%d', tid)

    return tasks
