import sys

from ssimulacra.cli import main

sys.exit(main())
