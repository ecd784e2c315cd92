import sys

from tempscope.cli import main

sys.exit(main())
