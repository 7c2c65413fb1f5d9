import sys

from subchangelog.cli.main import main

sys.exit(main())
