"""Ponci exceptions.
"""

import logging

_LOGGER = logging.getLogger(__name__)


class PonciError(Exception):
    """Base class for all Ponci errors.
    """

    __slots__ = (
    )

    @property
    def message(self):
        """The :class:`~PonciError`'s message.
        """
        # pylint: disable=unsubscriptable-object
        return self.args[0]

    def __init__(self, msg):
        super(PonciError, self).__init__(str(msg))

    def __str__(self):
        return self.message


class BufferTooSmallError(PonciError):
    """Fatal error, a control file line did not fit the read buffer."""

    __slots__ = (
        'path',
    )

    def __init__(self, path, size):
        super(BufferTooSmallError, self).__init__(
            msg='Line in %r does not fit a %d bytes buffer.' % (path, size)
        )
        self.path = path


class PreconditionViolation(PonciError, AssertionError):
    """Programming error, the caller broke an operation's precondition."""

    __slots__ = ()


class WaitTimeoutError(PonciError):
    """Thrown when a bounded poll runs out of attempts."""

    __slots__ = (
        'attempts',
    )

    def __init__(self, msg, attempts):
        super(WaitTimeoutError, self).__init__(msg=msg)
        self.attempts = attempts


class WaitCancelledError(PonciError):
    """Thrown when a poll is cancelled by the caller."""

    __slots__ = ()
