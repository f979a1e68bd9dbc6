import sys

from keel.interpreter import main

if __name__ == "__main__":
    sys.exit(main())
