"""Allow ``python -m smhi``."""

import sys

from smhi.cli import main

sys.exit(main())
