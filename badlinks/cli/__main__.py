import sys

from badlinks.cli import main

sys.exit(main())
