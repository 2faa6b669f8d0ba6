"""Allow ``python -m vec2d``."""

import sys

from .cli import main

sys.exit(main())
