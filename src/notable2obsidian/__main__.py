import sys

from notable2obsidian.cli import main

sys.exit(main())
