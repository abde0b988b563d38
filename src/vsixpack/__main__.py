import sys

from vsixpack.cli import main

sys.exit(main())
