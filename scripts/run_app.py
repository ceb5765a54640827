import sys
from lomofilter.cli import main

if __name__ == "__main__":
    sys.exit(main())
