import sys

from yu.repl import main

sys.exit(main())
