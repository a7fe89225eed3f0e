"""Cgroup lifecycle and cpuset attribute management.

Group wide operations (create, delete, add_task) walk every hierarchy of the
configuration and stop at the first failure. Nothing is rolled back: a failure
in the freezer hierarchy leaves the cpuset hierarchy already modified.
"""

import errno
import logging
import os

from ponci import cgroups
from ponci import codec


_LOGGER = logging.getLogger(__name__)

#: Membership pseudofile.
TASKS = 'tasks'

_CPUSET = 'cpuset'


def create(config, group):
    """Create the group in every hierarchy.

    Creating a group that already exists is not an error. The hierarchy roots
    and the parent group must exist.
    """
    for subsystem in config.hierarchies():
        fullpath = cgroups.makepath(config, group, subsystem)
        if _mkdir_safe(fullpath):
            _LOGGER.info('Created cgroup %s', fullpath)


def delete(config, group):
    """Delete the group in every hierarchy.

    The group must exist and be empty.
    """
    for subsystem in config.hierarchies():
        fullpath = cgroups.makepath(config, group, subsystem)
        try:
            os.rmdir(fullpath)
        except OSError as err:
            _LOGGER.error('Unable remove cgroup %s, %r', fullpath, err)
            raise
        _LOGGER.info('Deleted cgroup %s', fullpath)


def exists(config, group):
    """Check that the group exists in every hierarchy."""
    return all(
        os.path.isdir(cgroups.makepath(config, group, subsystem))
        for subsystem in config.hierarchies()
    )


def add_task(config, group, tid=None):
    """Move a task into the group, in every hierarchy.

    :param ``int`` tid:
        Task to move, defaults to the calling thread.
    """
    if tid is None:
        tid = cgroups.gettid()

    for subsystem in config.hierarchies():
        path = cgroups.makepath(config, group, subsystem, TASKS)
        cgroups.append_value(path, codec.encode_int(tid))


def tasks(config, group, subsystem=_CPUSET):
    """Returns the list of task ids in the group."""
    path = cgroups.makepath(config, group, subsystem, TASKS)
    return cgroups.read_lines(path)


def set_cpus(config, group, cpus):
    """Set the cpus tasks of the group may run on."""
    _set_cpuset(config, group, 'cpuset.cpus', codec.encode_list(cpus))


def get_cpus(config, group):
    """Get the cpus tasks of the group may run on."""
    return codec.parse_list(_get_cpuset(config, group, 'cpuset.cpus'))


def set_mems(config, group, mems):
    """Set the memory nodes tasks of the group may allocate from."""
    _set_cpuset(config, group, 'cpuset.mems', codec.encode_list(mems))


def get_mems(config, group):
    """Get the memory nodes tasks of the group may allocate from."""
    return codec.parse_list(_get_cpuset(config, group, 'cpuset.mems'))


def set_memory_migrate(config, group, flag):
    """Migrate pages to the new memory nodes when cpuset.mems changes."""
    _set_cpuset(config, group, 'cpuset.memory_migrate',
                codec.encode_flag(flag))


def set_cpu_exclusive(config, group, flag):
    """Do not share the group's cpus with sibling groups."""
    _set_cpuset(config, group, 'cpuset.cpu_exclusive',
                codec.encode_flag(flag))


def set_mem_hardwall(config, group, flag):
    """Restrict kernel allocations to the group's memory nodes."""
    _set_cpuset(config, group, 'cpuset.mem_hardwall',
                codec.encode_flag(flag))


def set_scheduling_domain(config, group, level):
    """Set the load balancing relax level (-1 to 5)."""
    _set_cpuset(config, group, 'cpuset.sched_relax_domain_level',
                codec.encode_domain_level(level))


def _set_cpuset(config, group, pseudofile, value):
    """Write an encoded value into a cpuset pseudofile."""
    path = cgroups.makepath(config, group, _CPUSET, pseudofile)
    cgroups.set_value(path, value)


def _get_cpuset(config, group, pseudofile):
    path = cgroups.makepath(config, group, _CPUSET, pseudofile)
    return cgroups.read_line(path)


def _mkdir_safe(path, mode=0o770):
    """Creates directory, ignoring the error if it already exists.

    The parent must exist, missing hierarchies are not created.

    :return ``Bool``:
        ``True`` - if the directory was created.
        ``False`` - if the directory already existed.
    """
    try:
        os.mkdir(path, mode)
        return True
    except OSError as err:
        # If dir already exists, no problem. Otherwise raise
        if err.errno == errno.EEXIST and os.path.isdir(path):
            return False
        else:
            raise
