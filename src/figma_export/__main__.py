import sys

from figma_export.cli import main

sys.exit(main())
