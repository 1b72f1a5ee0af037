import sys
from pathlib import Path

import pytest

# Make the package and client_demo importable without an install
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class Recorder:
    """Pixel sink that remembers every call in order."""

    def __init__(self):
        self.calls = []

    def __call__(self, x, y, color=None):
        self.calls.append((x, y) if color is None else (x, y, color))

    @property
    def cells(self):
        return [c[:2] for c in self.calls]

    @property
    def cell_set(self):
        return set(self.cells)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder
