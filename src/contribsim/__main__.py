"""Entry point for ``python -m contribsim``."""

import sys

from contribsim.cli import main

sys.exit(main())
