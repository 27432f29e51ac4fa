import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from tests.utils import parse_checked


@pytest.fixture
def parse():
    """Parse source text and fail the test if the parser reported errors."""
    return parse_checked
