import io

import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A plain-text console whose output can be read back with ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
