"""Ponci logging configuration helpers.
"""

import io
import json
import logging
import os


#: Environment variable pointing to a directory of logging configurations.
ENV_LOGGING_CONF = 'PONCI_LOGGING_CONF'


def set_log_level(log_level):
    """Set loglevel for all ponci modules
    """
    # pylint: disable=consider-iterating-dictionary
    # yes, we need to iterate keys
    logger_keys = [
        lk for lk in logging.Logger.manager.loggerDict.keys()
        if lk.split('.', 1)[0] == 'ponci'
    ]

    logging.getLogger().setLevel(log_level)
    for logger_key in logger_keys:
        logging.getLogger(logger_key).setLevel(log_level)


def load_logging_conf(name):
    """Load logging config json file by name.

    A file with the same name in the directory named by
    ``PONCI_LOGGING_CONF`` takes precedence over the packaged one.
    """
    logconf_path = os.path.join(os.path.dirname(__file__), name)

    if ENV_LOGGING_CONF in os.environ:
        override = os.path.join(os.environ[ENV_LOGGING_CONF], name)
        if os.path.exists(override):
            logconf_path = override

    with io.open(logconf_path) as f:
        return json.loads(f.read())
