"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

import pytest

# Add project root to path for okapi_index imports (no install needed)
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from okapi_index import BM25Index


@pytest.fixture
def example_index():
    """
    Three-document corpus used throughout the tests.

    doc 0: "Hello world"       (length 2)
    doc 1: "I like like cats"  (length 4, tf(like) = 2)
    doc 2: "I like dogs"       (length 3, tf(like) = 1)
    """
    index = BM25Index()
    index.index_document("Hello world", 0)
    index.index_document("I like like cats", 1)
    index.index_document("I like dogs", 2)
    return index
