import sys

from pdc_capacity.cli import main

sys.exit(main())
