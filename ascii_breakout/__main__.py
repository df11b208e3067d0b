import sys

from ascii_breakout.terminal import main

sys.exit(main())
