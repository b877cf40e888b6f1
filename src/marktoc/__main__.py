"""Allow ``python -m marktoc``."""

import sys

from marktoc.cli import main

sys.exit(main())
