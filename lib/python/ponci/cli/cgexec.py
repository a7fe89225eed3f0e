"""Run a command inside a cgroup.
"""

import logging
import os

import click

from ponci import cgutils
from ponci import cli
from ponci import utils


_LOGGER = logging.getLogger(__name__)


def init():
    """Return top level command handler."""

    @click.command(name='exec')
    @click.argument('group')
    @click.argument('subcommand', nargs=-1, required=True)
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def cgexec(obj, group, subcommand):
        """execs command into given cgroup, creating it if needed.
        """
        cgutils.create(obj['config'], group)
        cgutils.add_task(obj['config'], group, os.getpid())

        execargs = list(subcommand)
        _LOGGER.info('exec %r in %r', execargs, group)
        utils.sane_execvp(execargs[0], execargs)

    return cgexec
