# File: tests/conftest.py

import os
import sys
import threading
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


@pytest.fixture
def node_modules_tree(tmp_path):
    """
    Creates:
    /root
      /a/node_modules/f1     (12 bytes)
      /b/node_modules
      /b/src/node_modules
    """
    root = tmp_path / "root"
    a_modules = root / "a" / "node_modules"
    b_modules = root / "b" / "node_modules"
    nested_modules = root / "b" / "src" / "node_modules"

    for folder in (a_modules, b_modules, nested_modules):
        folder.mkdir(parents=True)

    (a_modules / "f1").write_bytes(b"test content")

    return root


@pytest.fixture
def no_leaked_workers():
    """Fails the test if any pool thread is still alive afterwards."""
    yield
    alive = [t.name for t in threading.enumerate() if t.name.startswith("dirstat-")]
    assert alive == []
