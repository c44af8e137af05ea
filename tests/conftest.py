"""
Shared fixtures for sqprovision tests.
"""

import logging
import os
import zipfile
from typing import List, Optional, Set, Tuple

import pytest

from sqprovision.sqprovision_logger import SqProvisionLogger


class FakeAnalysisServer:
    """
    In-memory analysis server.

    Writes `resource_bytes` to the requested file on download, or reports the
    resource as missing when `resource_bytes` is None.
    """

    def __init__(self, capabilities: Set[str], resource_bytes: Optional[bytes] = None):
        self.capabilities = capabilities
        self.resource_bytes = resource_bytes
        self.download_calls: List[Tuple[str, str, str]] = []

    def get_installed_capabilities(self) -> Set[str]:
        return set(self.capabilities)

    def try_download_embedded_resource(
        self, capability_id: str, resource_name: str, target_dir: str
    ) -> bool:
        self.download_calls.append((capability_id, resource_name, target_dir))
        if self.resource_bytes is None:
            return False
        with open(os.path.join(target_dir, resource_name), "wb") as f:
            f.write(self.resource_bytes)
        return True


def make_zip_bytes(tmp_path, files) -> bytes:
    """Build a zip archive holding the given {name: content} entries."""
    archive_path = tmp_path / "source.zip"
    with zipfile.ZipFile(archive_path, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    data = archive_path.read_bytes()
    archive_path.unlink()
    return data


@pytest.fixture
def logger():
    return SqProvisionLogger(level=logging.DEBUG)


@pytest.fixture
def fake_server_factory():
    return FakeAnalysisServer


@pytest.fixture
def zip_bytes_factory(tmp_path):
    def _factory(files):
        return make_zip_bytes(tmp_path, files)

    return _factory
