import sys

from giftery.cli import main

sys.exit(main())
