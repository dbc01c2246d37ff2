import sys

from sortedstack.app import main

sys.exit(main())
