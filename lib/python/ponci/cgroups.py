"""Common cgroups management routines.

Path resolution and the control file primitives every other module goes
through. Control files are kernel interfaces, not regular files: each call
opens and closes its own handle and nothing is cached between calls.
"""

import io
import logging
import os
import re
import threading

from ponci import exc


#: Size of the buffer a control file line must fit in, terminator included.
BUF_SIZE = 255

#: Where to read the task ids of a process.
_PROC_TASKS = '/proc/{}/task'

#: Leading integer of a line, the rest of the line is ignored.
_INT_RE = re.compile(r'\s*([+-]?[0-9]+)')

_LOGGER = logging.getLogger(__name__)


def makepath(config, group, subsystem=None, pseudofile=None):
    """Pieces together a full path of the cgroup.

    The directory path always ends with a separator. ``subsystem`` is ignored
    when the configuration mounts everything in a single hierarchy.
    """
    parts = [config.root_path()]
    if config.separated:
        if not subsystem:
            raise ValueError('subsystem is required for %r' % group)
        parts.append(subsystem)

    group = group.strip('/')
    if group:
        parts.append(group)

    path = os.path.join(*parts, '')
    if pseudofile:
        return path + pseudofile
    return path


def set_value(path, value):
    """Truncate the control file and write value into it."""
    # Make sure we have utf8 strings
    if hasattr(value, 'decode'):
        value = value.decode()
    value = '{}'.format(value)
    _LOGGER.debug('setting %s => %s', path, value)
    with io.open(path, 'w') as f:
        f.write(value)


def append_value(path, value):
    """Append value to the control file, creating it if needed."""
    if hasattr(value, 'decode'):
        value = value.decode()
    value = '{}'.format(value)
    _LOGGER.debug('appending %s => %s', path, value)
    with io.open(path, 'a') as f:
        f.write(value)


def read_line(path):
    """Reads the first line of a control file, terminator included.

    :returns:
        ``str`` - The line, or ``''`` if the file is empty.
    :raises ``exc.BufferTooSmallError``:
        If the line does not fit in :data:`BUF_SIZE`.
    """
    with io.open(path, 'r', encoding='ascii', errors='replace') as f:
        return _readline(f, path)


def read_lines(path):
    """Reads a list of integers, one per line, from a control file.

    Lines without a leading integer are skipped.
    """
    values = []
    with io.open(path, 'r', encoding='ascii', errors='replace') as f:
        while True:
            line = _readline(f, path)
            if not line:
                break

            value = _parse_int(line)
            if value is None:
                _LOGGER.debug('skipping %r in %s', line, path)
                continue

            values.append(value)

    return values


def proc_tasks(pid=None):
    """Read the ids of all the tasks (threads) of a process.

    :returns:
        ``list`` - Task ids found in ``/proc/<pid>/task``.
    """
    if pid is None:
        pid = os.getpid()
    if not isinstance(pid, int) and '/' in pid:
        raise ValueError('invalid pid: %r' % pid)

    path = _PROC_TASKS.format(pid)
    tids = []
    for entry in os.listdir(path):
        if not os.path.isdir(os.path.join(path, entry)):
            continue
        try:
            tids.append(int(entry))
        except ValueError:
            continue

    return tids


def gettid():
    """Kernel task id of the calling thread."""
    return threading.get_native_id()


def _readline(f, path):
    """Read one line from f, refusing lines longer than the buffer."""
    limit = BUF_SIZE - 1
    line = f.readline(limit)
    if len(line) == limit and not line.endswith('\n') and f.read(1):
        raise exc.BufferTooSmallError(path, BUF_SIZE)

    return line


def _parse_int(line):
    """Parse the leading integer of a line, None if there is none."""
    match = _INT_RE.match(line)
    if match is None:
        return None
    return int(match.group(1), base=10)
