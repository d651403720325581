import sys

from guess_it import main

if __name__ == '__main__':
    sys.exit(main())
