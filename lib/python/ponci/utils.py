"""Useful utility functions.
"""

import logging
import os
import signal
import time

from ponci import exc


_LOGGER = logging.getLogger(__name__)

# List of signals that can be manipulated
_SIGNALS = (set(range(1, signal.NSIG)) -
            {signal.SIGKILL, signal.SIGSTOP, 32, 33})


def poll(check, interval=0, max_attempts=None, cancel=None, what='state'):
    """Call check until it returns a true value.

    With the defaults this spins forever: the kernel is trusted to converge.

    :param ``callable`` check:
        Called with no arguments on every attempt.
    :param ``float`` interval:
        Seconds to sleep between attempts.
    :param ``int`` max_attempts:
        Give up after that many attempts, ``None`` to never give up.
    :param ``threading.Event`` cancel:
        When set, the poll stops at the next attempt.
    :returns:
        ``int`` - Number of attempts made.
    :raises ``exc.WaitTimeoutError``:
        If ``max_attempts`` is exhausted.
    :raises ``exc.WaitCancelledError``:
        If ``cancel`` is set.
    """
    attempts = 0
    while True:
        if cancel is not None and cancel.is_set():
            raise exc.WaitCancelledError(
                'Wait for %s cancelled after %d attempts.' % (what, attempts)
            )

        attempts += 1
        if check():
            _LOGGER.debug('%s reached after %d attempts', what, attempts)
            return attempts

        if max_attempts is not None and attempts >= max_attempts:
            raise exc.WaitTimeoutError(
                'Wait for %s timed out after %d attempts.' % (what, attempts),
                attempts
            )

        if interval:
            time.sleep(interval)


def parse_signal(value):
    """Convert a signal name (TERM, SIGTERM) or number to a signal."""
    if isinstance(value, int) or value.isdigit():
        return signal.Signals(int(value))

    name = value.upper()
    if not name.startswith('SIG'):
        name = 'SIG' + name

    try:
        return signal.Signals[name]
    except KeyError:
        raise ValueError('Invalid signal: %r' % value)


def restore_signals():
    """Reset the default behavior to all signals.
    """
    for i in _SIGNALS:
        signal.signal(i, signal.SIG_DFL)


def sane_execvp(filename, args, signals=True):
    """Execute a new program with sanitized environment.
    """
    if signals:
        restore_signals()
    os.execvp(filename, args)
