"""Delete cgroups.
"""

import click

from ponci import cgutils
from ponci import cli


def init():
    """Return top level command handler."""

    @click.command()
    @click.argument('groups', nargs=-1, required=True)
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def delete(obj, groups):
        """Delete empty cgroup(s) in every hierarchy."""
        for group in groups:
            cgutils.delete(obj['config'], group)

    return delete
