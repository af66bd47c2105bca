import sys

from order_tracker.main import main

sys.exit(main())
