import sys

from .cli.dump import main

sys.exit(main())
