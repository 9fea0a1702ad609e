import sys

from product_filter.cli import main

sys.exit(main())
