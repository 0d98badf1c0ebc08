import sys

from ecolife.cli import main

sys.exit(main())
