"""Set cpuset attributes of a cgroup.
"""

import click

from ponci import cgutils
from ponci import cli


def _init_list(name, setter):
    """Build a command writing a list of ids."""

    @click.command(name=name)
    @click.argument('group')
    @click.argument('values', type=cli.INT_LIST)
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def _set(obj, group, values):
        setter(obj['config'], group, values)

    return _set


def _init_int(name, setter, metavar):
    """Build a command writing a single integer."""

    @click.command(name=name)
    @click.argument('group')
    @click.argument('value', type=int, metavar=metavar)
    @click.pass_obj
    @cli.handle_exceptions(cli.ON_EXCEPTIONS)
    def _set(obj, group, value):
        setter(obj['config'], group, value)

    return _set


def init_cpus():
    """Return top level command handler."""
    command = _init_list('set-cpus', cgutils.set_cpus)
    command.help = 'Set the cpus of the cgroup, e.g. 0,1,3 or 0-2.'
    return command


def init_mems():
    """Return top level command handler."""
    command = _init_list('set-mems', cgutils.set_mems)
    command.help = 'Set the memory nodes of the cgroup, e.g. 0,1.'
    return command


def init_memory_migrate():
    """Return top level command handler."""
    command = _init_int('set-memory-migrate', cgutils.set_memory_migrate,
                        '0|1')
    command.help = 'Migrate memory pages when the memory nodes change.'
    return command


def init_cpu_exclusive():
    """Return top level command handler."""
    command = _init_int('set-cpu-exclusive', cgutils.set_cpu_exclusive,
                        '0|1')
    command.help = 'Do not share the cgroup cpus with its siblings.'
    return command


def init_mem_hardwall():
    """Return top level command handler."""
    command = _init_int('set-mem-hardwall', cgutils.set_mem_hardwall,
                        '0|1')
    command.help = 'Restrict kernel allocations to the cgroup memory nodes.'
    return command


def init_sched_domain():
    """Return top level command handler."""
    command = _init_int('set-sched-domain', cgutils.set_scheduling_domain,
                        'LEVEL')
    command.help = 'Set the scheduling domain relax level (-1 to 5).'
    return command
