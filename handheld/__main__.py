import sys

from handheld.cli import main

sys.exit(main())
