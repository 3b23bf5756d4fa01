import sys

from fivewords.cli import main

sys.exit(main())
