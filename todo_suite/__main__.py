import sys

from todo_suite.cli import main

sys.exit(main())
