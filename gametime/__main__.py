import sys

from gametime.cli import main

sys.exit(main())
