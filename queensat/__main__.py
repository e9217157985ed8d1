import sys

from queensat.cli import main

sys.exit(main())
