import sys
import os

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from autotheme import generate_theme
from .samples import PURPLE


@pytest.fixture
def purple_theme():
    """Full-range hex theme from the reference purple."""
    return generate_theme(PURPLE, "hex", "hex", "50", "950")
