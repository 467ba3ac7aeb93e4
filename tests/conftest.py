from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared diagrams used across unit and integration tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_diagram() -> str:
    """Two roots, one file with content and one without."""
    return (
        "|_dir-a\n"
        "| |_dir-b\n"
        "|   |_file-one\n"
        '|     "hello"\n'
        "|_dir-c\n"
        "  |_file-two\n"
    )


@pytest.fixture
def jcr_diagram() -> str:
    """
    Indented diagram with a bare '|' spacer line between root sections.
    """
    return r'''
        |_initial-content
        | |_jcr-root
        |   |_content
        |     |_test-file
        |       "initial-content"
        |
        |_server-zip
          |_jcr-root
            |_content
              |_test-file
                "zip-content"
    '''
