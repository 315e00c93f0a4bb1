import sys

from pv.commands.pv_main import main

if __name__ == '__main__':
    sys.exit(main())
