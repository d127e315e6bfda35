"""Allow running as ``python -m zipbatch``."""

import sys

from zipbatch.main import main

sys.exit(main())
