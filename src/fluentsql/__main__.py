"""Run the fluentsql CLI with ``python -m fluentsql``."""

import sys

from .cli import main

sys.exit(main())
