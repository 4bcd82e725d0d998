import sys

from doclinks.cli import main

sys.exit(main())
