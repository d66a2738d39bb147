import sys

from thelemicdate.cli import main

sys.exit(main())
