import sys

from snail_cli.main import main

sys.exit(main())
