import sys

from infixcalc.cli import main

sys.exit(main())
