from __future__ import annotations

"""
Smoke tests for the public package surface.
"""

import setupfs


def test_public_api_contract():
    for name in setupfs.__all__:
        assert hasattr(setupfs, name), f"setupfs missing: {name}"


def test_error_hierarchy_roots():
    assert issubclass(setupfs.InvalidDepthJump, setupfs.ParseError)
    assert issubclass(setupfs.OrphanContent, setupfs.ParseError)
    assert issubclass(setupfs.MalformedLine, setupfs.ParseError)
    assert issubclass(setupfs.DirectoryWithContent, setupfs.ParseError)
    assert issubclass(setupfs.EmptyPathError, setupfs.MaterializeError)
    assert issubclass(setupfs.ParseError, setupfs.SetupFsError)
    assert issubclass(setupfs.MaterializeError, setupfs.SetupFsError)
