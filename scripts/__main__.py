"""Allow `python -m scripts <snapshots.json>` by running the report script."""

import sys

from scripts.sector_report import main

sys.exit(main())
