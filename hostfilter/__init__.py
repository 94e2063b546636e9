"""Host constraint filter.

Decides whether a candidate host satisfies the placement constraints of a
job's task, producing vetoes for the hosts that do not.
"""

import os
import pkgutil

__path__ = pkgutil.extend_path(__path__, __name__)


# Optional directory holding configuration overrides (logging, etc.).
APPROOT = os.environ.get('HOSTFILTER_APPROOT', '')
