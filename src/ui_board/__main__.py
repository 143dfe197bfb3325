import sys

from ui_board.cli import main

sys.exit(main())
