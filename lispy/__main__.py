import sys

from lispy.cli import main

sys.exit(main())
