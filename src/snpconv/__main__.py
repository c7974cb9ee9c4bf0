"""Allow running as `python -m snpconv`."""

import sys

from .main import main

sys.exit(main())
