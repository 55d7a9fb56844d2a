import sys

from svnmerge.cli.main import main

sys.exit(main())
