import sys

from newgtlds.cli.update import main

sys.exit(main())
