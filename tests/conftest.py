"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def manifest_yml(tmp_path: Path) -> Path:
    """Create a valid pods.yml in a temp directory."""
    content = textwrap.dedent("""\
        version: 1
        build_configurations:
          - Debug
          - Release
        target_definitions:
          - name: Pods-AFNetworking
            pod: AFNetworking
          - name: Pods-Reveal-iOS-SDK
            pod: Reveal-iOS-SDK
        pods:
          - name: AFNetworking
            version: 2.3.1
            subspecs:
              - NSURLSession
          - name: Reveal-iOS-SDK
            version: HEAD
            configurations:
              - Debug
    """)
    path = tmp_path / "pods.yml"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by the CLI or logging tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
