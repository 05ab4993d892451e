import sys

from pawslib.cli import main

sys.exit(main())
