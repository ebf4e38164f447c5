"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of hiegraph modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("hiegraph"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _clean_run_id() -> Generator[None, None, None]:
    """Each test starts without a batch correlation id."""
    from hiegraph.core.logging import clear_run_id

    clear_run_id()
    yield
    clear_run_id()
