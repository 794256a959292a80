import sys

from slisp.repl import main

sys.exit(main())
