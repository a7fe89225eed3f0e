"""Conversion of attribute values to and from control file text.
"""

import enum
import logging

from ponci import exc


_LOGGER = logging.getLogger(__name__)

#: Valid range of cpuset.sched_relax_domain_level.
DOMAIN_LEVELS = range(-1, 6)


class FreezerState(enum.Enum):
    """Terminal states of the freezer, valued by their kernel label."""
    FROZEN = 'FROZEN'
    THAWED = 'THAWED'


def encode_int(value):
    """Decimal representation of an integer."""
    return '%d' % value


def encode_list(values):
    """Comma terminated list of integers, e.g. ``[0, 1, 3]`` => ``0,1,3,``.
    """
    values = list(values)
    if not values:
        raise exc.PreconditionViolation('Empty value list.')

    for value in values:
        if value < 0:
            raise exc.PreconditionViolation(
                'Negative value in list: %r' % values
            )

    return ''.join('%d,' % value for value in values)


def encode_flag(flag):
    """Encode a 0/1 flag."""
    if flag not in (0, 1):
        raise exc.PreconditionViolation('Invalid flag: %r' % flag)
    return encode_int(int(flag))


def encode_domain_level(level):
    """Encode a scheduler domain relax level."""
    if level not in DOMAIN_LEVELS:
        raise exc.PreconditionViolation(
            'Invalid scheduling domain level: %r' % level
        )
    return encode_int(level)


def encode_state(state):
    """Kernel label of a freezer state."""
    return FreezerState(state).value


def parse_list(text):
    """Parse a list of integers written by us or by the kernel.

    Both ``0,1,3,`` and the kernel's range format ``0-1,3`` are accepted.

    :returns:
        ``list`` - Sorted integers.
    """
    values = set()
    for item in text.strip().split(','):
        item = item.strip()
        if not item:
            continue

        if '-' in item:
            low, high = item.split('-', 1)
            values.update(range(int(low), int(high) + 1))
        else:
            values.add(int(item))

    return sorted(values)


def parse_state(text):
    """Parse freezer.state content.

    :returns:
        ``FreezerState`` - or ``None`` while the group is transitioning.
    """
    try:
        return FreezerState(text.strip())
    except ValueError:
        return None
