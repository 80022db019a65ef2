import sys

from formtree.cli import main

sys.exit(main())
