"""Allow running playmark as ``python -m playmark``."""

import sys

from playmark.cli import main

sys.exit(main())
