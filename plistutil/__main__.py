"""Package entry point for ``python -m plistutil``.

WHY: Users run the converter as ``python -m plistutil -i in.plist`` when
the console script is not on PATH.

HOW: Delegates to the CLI's main() and exits with its return code.
"""

import sys

if __name__ == "__main__":
    from plistutil.cli import main
    sys.exit(main())
