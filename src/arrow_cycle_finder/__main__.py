import sys

from arrow_cycle_finder.cli import main

sys.exit(main())
