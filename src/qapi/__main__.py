import sys

from qapi.main import main

sys.exit(main())
