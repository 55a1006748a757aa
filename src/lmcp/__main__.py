# Entry point for `python -m lmcp`
import sys

from lmcp.cli import main

sys.exit(main())
