"""Allow ``python -m tidyfs``."""

import sys

from tidyfs.ui.cli.cli import main

sys.exit(main())
