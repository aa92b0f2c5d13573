import sys

from h3_filters.cli.main import main

sys.exit(main())
