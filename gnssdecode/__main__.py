import sys

from gnssdecode.cli import main

sys.exit(main())
