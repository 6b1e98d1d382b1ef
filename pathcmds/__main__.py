import sys

from pathcmds.cli import main

sys.exit(main())
