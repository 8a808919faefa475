"""Root conftest: put this checkout's src/ first on sys.path.

Lets the test suite import postcraft_mcp straight from the source tree,
ahead of any installed copy.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
