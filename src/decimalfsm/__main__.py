"""Entry point for ``python -m decimalfsm``."""

import sys

from decimalfsm.cli import main

sys.exit(main())
