"""`python -m asusctl_gui` entrypoint.

For installed usage, prefer the `asusctl-gui-core` console script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
