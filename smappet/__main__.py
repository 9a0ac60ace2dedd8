import sys

from smappet.cli.main import main

sys.exit(main())
