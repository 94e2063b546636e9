"""Host filter logging helpers.
"""

import io
import json
import logging
import os

import hostfilter

_LOGCONF_DIR = os.path.abspath(os.path.dirname(__file__))


def set_log_level(log_level):
    """Set loglevel for all hostfilter modules
    """
    # pylint: disable=consider-iterating-dictionary
    # yes, we need to iterate keys
    logger_keys = [
        lk for lk in logging.Logger.manager.loggerDict.keys()
        if '.' not in lk and lk.startswith('hostfilter')
    ]

    logging.getLogger().setLevel(log_level)
    for logger_key in logger_keys:
        logging.getLogger(logger_key).setLevel(log_level)


def load_logging_conf(name):
    """Load logging config json file.

    The file in $HOSTFILTER_APPROOT/logging takes precedence over the one
    shipped with the package.
    """
    logconf_path = os.path.join(hostfilter.APPROOT, 'logging', name)
    if not hostfilter.APPROOT or not os.path.exists(logconf_path):
        logconf_path = os.path.join(_LOGCONF_DIR, name)

    with io.open(logconf_path) as f:
        return json.loads(f.read())
