import sys

from sectorgraph.cli import main

sys.exit(main())
