"""Run assistcheck as `python -m assistcheck`."""

import sys

from assistcheck.presentation.cli import main

sys.exit(main())
