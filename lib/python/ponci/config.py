"""Ponci configuration.

A :class:`Config` is built once at process start (the CLI builds it from its
options) and handed to every operation. It never changes afterwards, so all
group operations in a run agree on the subsystem layout.
"""

import logging
import os


_LOGGER = logging.getLogger(__name__)

#: Default cgroup mount point.
CGROOT = '/sys/fs/cgroup/'

#: Environment variable overriding the mount point, read on every resolution.
ENV_ROOT = 'PONCI_PATH'

#: Subsystems used when each one is mounted in its own hierarchy.
SUBSYSTEMS = ('cpuset', 'freezer')

#: Subsystems the operations know how to drive.
KNOWN_SUBSYSTEMS = frozenset(SUBSYSTEMS)


class Config:
    """Ponci configuration value.

    :param ``str`` root:
        Default mount point of the cgroup filesystem.
    :param ``tuple`` subsystems:
        Subsystems mounted as separate hierarchies under ``root``. Empty when
        everything is mounted in a single directory.
    :param ``str`` env_var:
        Name of the environment variable overriding ``root``, ``None`` to
        ignore the environment.
    :param ``float`` poll_interval:
        Seconds to sleep between two polls of a control file. ``0`` spins.
    :param ``int`` max_attempts:
        Maximum number of polls before giving up, ``None`` polls forever.
    """

    __slots__ = (
        'root',
        'subsystems',
        'env_var',
        'poll_interval',
        'max_attempts',
    )

    def __init__(self, root=CGROOT, subsystems=SUBSYSTEMS, env_var=ENV_ROOT,
                 poll_interval=0, max_attempts=None):
        subsystems = tuple(subsystems)
        unknown = set(subsystems) - KNOWN_SUBSYSTEMS
        if unknown:
            raise ValueError('Unknown subsystems: %r' % sorted(unknown))

        if poll_interval < 0:
            raise ValueError('Invalid poll interval: %r' % poll_interval)

        if max_attempts is not None and max_attempts <= 0:
            raise ValueError('Invalid max attempts: %r' % max_attempts)

        self.root = root
        self.subsystems = subsystems
        self.env_var = env_var
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts

    @classmethod
    def flat(cls, **kwargs):
        """Configuration with all subsystems mounted in the same directory.
        """
        return cls(subsystems=(), **kwargs)

    @property
    def separated(self):
        """Whether each subsystem has its own hierarchy."""
        return bool(self.subsystems)

    def hierarchies(self):
        """Subsystems group wide operations iterate over.

        In the flat layout there is a single, unnamed hierarchy.
        """
        if self.separated:
            return self.subsystems
        return (None,)

    def root_path(self):
        """Current mount point, honoring the environment override."""
        if self.env_var and self.env_var in os.environ:
            return os.environ[self.env_var]
        return self.root

    def __repr__(self):
        return (
            '{cls}(root={root!r}, subsystems={subsystems!r}, '
            'poll_interval={interval!r}, max_attempts={attempts!r})'.format(
                cls=self.__class__.__name__,
                root=self.root_path(),
                subsystems=self.subsystems,
                interval=self.poll_interval,
                attempts=self.max_attempts,
            )
        )
