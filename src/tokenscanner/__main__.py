import sys

from tokenscanner.main import main

sys.exit(main())
