import sys

from dorkhound.api.cli import main

sys.exit(main())
