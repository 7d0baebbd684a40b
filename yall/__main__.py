import sys

from yall.repl import main

if __name__ == "__main__":
    sys.exit(main())
