"""Package entry point for ``python -m wordchain``.

WHY: Users run the generator as ``python -m wordchain sentence book.txt 8``
without installing the console script.

RULES:
- Delegates everything to wordchain.cli.main()
- The process exit status is main()'s return value
"""

import sys

from wordchain.cli import main

if __name__ == "__main__":
    sys.exit(main())
