import sys
from lj_sweep.cli import main

sys.exit(main())
