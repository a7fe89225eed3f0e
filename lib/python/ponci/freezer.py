"""Freezer state synchronization.

Freezing is asynchronous: writing ``FROZEN`` to ``freezer.state`` starts the
transition and the kernel reports ``FREEZING`` until every task is stopped.
The ``wait_*`` functions poll the state file until the requested state is
reported. The control file offers no blocking wait, so polling is all there
is; how long to poll is up to the configuration (forever by default).
"""

import logging

from ponci import cgroups
from ponci import codec
from ponci import exc
from ponci import utils

FreezerState = codec.FreezerState

#: Freezer state pseudofile.
FREEZER_STATE = 'freezer.state'

_FREEZER = 'freezer'

_LOGGER = logging.getLogger(__name__)


def freeze(config, group):
    """Request all tasks of the group to be frozen.

    The root group cannot be frozen.
    """
    _check_not_root(group)
    _LOGGER.info('Freezing cgroup %r', group)
    cgroups.set_value(_state_path(config, group),
                      codec.encode_state(FreezerState.FROZEN))


def thaw(config, group):
    """Request all tasks of the group to be thawed."""
    _LOGGER.info('Thawing cgroup %r', group)
    cgroups.set_value(_state_path(config, group),
                      codec.encode_state(FreezerState.THAWED))


def state(config, group):
    """Current freezer state of the group.

    :returns:
        ``FreezerState`` - or ``None`` while the group is transitioning.
    """
    return codec.parse_state(cgroups.read_line(_state_path(config, group)))


def wait_frozen(config, group, cancel=None):
    """Block until the group is frozen."""
    _check_not_root(group)
    _wait_state(config, group, FreezerState.FROZEN, cancel)


def wait_thawed(config, group, cancel=None):
    """Block until the group is thawed."""
    _wait_state(config, group, FreezerState.THAWED, cancel)


def _wait_state(config, group, wanted, cancel):
    """Poll the state file until it reads exactly the wanted label."""
    path = _state_path(config, group)
    expected = codec.encode_state(wanted) + '\n'

    _LOGGER.debug('Waiting for %s to be %s', path, wanted.value)
    utils.poll(
        lambda: cgroups.read_line(path) == expected,
        interval=config.poll_interval,
        max_attempts=config.max_attempts,
        cancel=cancel,
        what='%s %s' % (group, wanted.value),
    )


def _state_path(config, group):
    return cgroups.makepath(config, group, _FREEZER, FREEZER_STATE)


def _check_not_root(group):
    """Refuse to operate on the root group."""
    if not group.strip('/'):
        raise exc.PreconditionViolation('The root cgroup cannot be frozen.')
