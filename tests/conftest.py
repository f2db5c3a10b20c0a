import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Make the flat-layout packages importable without an editable install.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def runner():
    return CliRunner()
