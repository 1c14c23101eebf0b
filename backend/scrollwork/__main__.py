"""python -m scrollwork"""

import sys

from scrollwork.cli import main

sys.exit(main())
