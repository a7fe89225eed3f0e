"""Terminate all tasks of a cgroup and remove it.
"""

import logging
import os
import signal

from ponci import cgroups
from ponci import cgutils
from ponci import utils


_LOGGER = logging.getLogger(__name__)


def kill(config, group, sig=signal.SIGTERM, cancel=None):
    """Signal every task of the group, wait for it to drain, delete it.

    Tasks of the calling process are never signalled. A group holding only
    tasks of the calling process therefore never drains.

    :raises ``OSError``:
        If a task cannot be signalled, e.g. it exited in the meantime.
    """
    own_tids = set(cgroups.proc_tasks())

    for tid in cgutils.tasks(config, group):
        if tid in own_tids:
            _LOGGER.debug('Not killing own task %d in %r', tid, group)
            continue

        _LOGGER.info('killing task from %r: %d', group, tid)
        os.kill(tid, sig)

    utils.poll(
        lambda: not cgutils.tasks(config, group),
        interval=config.poll_interval,
        max_attempts=config.max_attempts,
        cancel=cancel,
        what='%s empty' % group,
    )

    cgutils.delete(config, group)
