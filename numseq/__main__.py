import sys

from numseq.cli import main

sys.exit(main())
