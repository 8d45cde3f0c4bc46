import sys
from pathlib import Path

# Put the repository root first on sys.path so pytest imports this checkout's
# jdfilter package and scripts/ rather than any installed copy.
_root = str(Path(__file__).parent)
if _root not in sys.path:
    sys.path.insert(0, _root)
