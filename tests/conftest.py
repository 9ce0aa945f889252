import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), '..', 'examples')


@pytest.fixture
def examples_dir():
    return EXAMPLES_DIR


@pytest.fixture
def streams():
    """A (stdin, stdout) pair of in-memory binary streams."""
    def make(input_data=b""):
        return io.BytesIO(input_data), io.BytesIO()
    return make
