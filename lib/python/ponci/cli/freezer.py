"""Freeze, thaw and inspect cgroups.
"""

import click

from ponci import cli
from ponci import freezer


def init_freeze():
    """Return top level command handler."""

    @click.command()
    @click.option('--wait', is_flag=True, default=False,
                  help='Wait for all tasks to be frozen.')
    @click.argument('group')
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def freeze(obj, wait, group):
        """Freeze all tasks of the cgroup."""
        freezer.freeze(obj['config'], group)
        if wait:
            freezer.wait_frozen(obj['config'], group)

    return freeze


def init_thaw():
    """Return top level command handler."""

    @click.command()
    @click.option('--wait', is_flag=True, default=False,
                  help='Wait for all tasks to be thawed.')
    @click.argument('group')
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def thaw(obj, wait, group):
        """Thaw all tasks of the cgroup."""
        freezer.thaw(obj['config'], group)
        if wait:
            freezer.wait_thawed(obj['config'], group)

    return thaw


def init_state():
    """Return top level command handler."""

    @click.command()
    @click.argument('group')
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def state(obj, group):
        """Show the freezer state of the cgroup."""
        current = freezer.state(obj['config'], group)
        if current is None:
            cli.out('TRANSITIONING')
        else:
            cli.out(current.value)

    return state
