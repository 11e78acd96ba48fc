"""Allow running as ``python -m spellcore``."""

import sys

from .main import main

sys.exit(main())
