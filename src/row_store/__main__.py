"""Allow running the row store with `python -m row_store`."""

import sys

from row_store.adapters.inbound.cli import main

sys.exit(main())
