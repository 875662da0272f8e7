import sys

from linewrap.cli import main

sys.exit(main())
