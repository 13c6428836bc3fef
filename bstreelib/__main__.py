"""Allow ``python -m bstreelib`` to run the word tracker."""

import sys

from .cli import main

sys.exit(main())
