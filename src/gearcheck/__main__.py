"""Allow `python -m gearcheck`."""

import sys

from gearcheck.presentation.cli import main

sys.exit(main())
