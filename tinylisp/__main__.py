import sys

from tinylisp.cli import main

sys.exit(main())
