"""Ponci command line helpers.
"""

import functools
import importlib
import logging
import logging.config
import sys
import traceback

import click

from ponci import codec
from ponci import config as pconfig
from ponci import exc
from ponci import logging as plogging


EXIT_CODE_DEFAULT = 1

_LOGGER = logging.getLogger(__name__)

#: Command name => "module:attribute" of the function building the command.
COMMANDS = {
    'add-task': 'ponci.cli.add_task:init',
    'create': 'ponci.cli.create:init',
    'delete': 'ponci.cli.delete:init',
    'exec': 'ponci.cli.cgexec:init',
    'freeze': 'ponci.cli.freezer:init_freeze',
    'kill': 'ponci.cli.kill:init',
    'set-cpu-exclusive': 'ponci.cli.cpuset:init_cpu_exclusive',
    'set-cpus': 'ponci.cli.cpuset:init_cpus',
    'set-mem-hardwall': 'ponci.cli.cpuset:init_mem_hardwall',
    'set-memory-migrate': 'ponci.cli.cpuset:init_memory_migrate',
    'set-mems': 'ponci.cli.cpuset:init_mems',
    'set-sched-domain': 'ponci.cli.cpuset:init_sched_domain',
    'state': 'ponci.cli.freezer:init_state',
    'tasks': 'ponci.cli.tasks:init',
    'thaw': 'ponci.cli.freezer:init_thaw',
}


def init_logger(name):
    """Initialize logger.
    """
    try:
        # logging configuration files in json format
        conf = plogging.load_logging_conf(name)
        logging.config.dictConfig(conf)
    except (OSError, ValueError) as err:
        click.echo('Error parsing log conf: {name}: {err}'.format(
            name=name, err=err), err=True)


def make_config(root, flat, poll_interval, max_attempts):
    """Build the configuration of this invocation from the CLI options.

    An explicit root wins over the environment override.
    """
    kwargs = {
        'poll_interval': poll_interval,
        'max_attempts': max_attempts,
    }
    if root:
        kwargs['root'] = root
        kwargs['env_var'] = None

    try:
        if flat:
            return pconfig.Config.flat(**kwargs)
        return pconfig.Config(**kwargs)
    except ValueError as err:
        raise click.UsageError(str(err))


def _load_entry(entry):
    """Load command entry."""
    module_name, attrs = entry.split(':', 1)
    plugin = importlib.import_module(module_name)
    for extra in attrs.split('.'):
        plugin = getattr(plugin, extra)
    return plugin


def make_commands(commands):
    """Make a Click multicommand from a command name => entry mapping."""

    class MCommand(click.Group):
        """Ponci CLI driver."""

        def list_commands(self, ctx):
            """Return list of commands."""
            return sorted(commands)

        def get_command(self, ctx, cmd_name):
            """Return dymanically constructed command."""
            try:
                return _load_entry(commands[cmd_name])()
            except KeyError:
                raise click.UsageError('Invalid command: %s' % cmd_name)

    return MCommand


class _IntList(click.ParamType):
    """Custom input type for lists of integers, e.g. 0,1,3 or 0-2,5."""
    name = 'list'

    def convert(self, value, param, ctx):
        """Convert command line argument to list of integers."""
        if isinstance(value, list):
            return value

        try:
            return codec.parse_list(value)
        except ValueError:
            self.fail('%s is not a list of integers' % value, param, ctx)


INT_LIST = _IntList()


def out(string, *args):
    """Print to stdout."""
    if args:
        string = string % args

    click.echo(string)


ON_EXCEPTIONS = [
    (exc.PreconditionViolation, lambda err: 'Invalid argument: %s' % err),
    (exc.PonciError, None),
    (OSError, lambda err: 'Error: %s' % err),
]


def handle_exceptions(exclist):
    """Decorator that will handle exceptions and output friendly messages."""

    def wrap(f):
        """Returns decorator that wraps/handles exceptions."""

        @functools.wraps(f)
        def _handle_any(*args, **kwargs):
            """Default exception handler."""
            try:
                return f(*args, **kwargs)

            except click.UsageError as usage_err:
                click.echo('Usage error: %s' % str(usage_err), err=True)
                sys.exit(EXIT_CODE_DEFAULT)

            except Exception as err:  # pylint: disable=W0703
                for exc_type, handler in exclist:
                    if not isinstance(err, exc_type):
                        continue

                    _LOGGER.debug('Command failed', exc_info=True)
                    if isinstance(handler, str):
                        click.echo(handler, err=True)
                    elif handler is None:
                        click.echo(str(err), err=True)
                    else:
                        click.echo(handler(err), err=True)

                    sys.exit(EXIT_CODE_DEFAULT)

                import tempfile

                with tempfile.NamedTemporaryFile(delete=False,
                                                 mode='w') as tb_file:
                    traceback.print_exc(file=tb_file)
                    click.echo('Error: %s [ %s ]' % (err, tb_file.name),
                               err=True)

                sys.exit(EXIT_CODE_DEFAULT)

        return _handle_any

    return wrap
