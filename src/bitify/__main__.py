import sys

from bitify.cli import main

sys.exit(main())
