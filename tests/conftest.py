import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import drive_ticks, identity_shuffle, setup_board

__all__ = [
    "drive_ticks",
    "identity_shuffle",
    "setup_board",
]
