import sys
from nogo.cli import main

sys.exit(main())
