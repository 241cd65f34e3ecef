import json
import zipfile
from pathlib import Path
from typing import Any, Dict, Optional

import pytest


class PackageBuilder:
    def __init__(self, metadata: Optional[Dict[str, Any]] = None):
        self.metadata: Optional[Dict[str, Any]] = metadata if metadata is not None else {
            "type": "static",
            "target": "modal",
            "targetWidth": "800px",
            "targetHeight": "60%",
        }
        self.raw_metadata: Optional[str] = None
        self.files: Dict[str, str] = {"index.html": "<div></div>\n"}

    def with_metadata(self, **fields):
        self.metadata = dict(self.metadata or {}, **fields)
        return self

    def with_raw_metadata(self, text: str):
        self.raw_metadata = text
        return self

    def without_metadata(self):
        self.metadata = None
        self.raw_metadata = None
        return self

    def with_file(self, name: str, content: str):
        self.files[name] = content
        return self

    def _entries(self) -> Dict[str, str]:
        entries = dict(self.files)
        if self.raw_metadata is not None:
            entries["metadata.json"] = self.raw_metadata
        elif self.metadata is not None:
            entries["metadata.json"] = json.dumps(self.metadata)
        return entries

    def write_dir(self, root: Path) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for name, content in self._entries().items():
            target = root / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    def write_zip(self, archive_path: Path) -> Path:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in self._entries().items():
                archive.writestr(name, content)
        return archive_path


@pytest.fixture
def package_builder():
    return PackageBuilder


@pytest.fixture
def scratch_root(tmp_path):
    root = tmp_path / "scratch"
    root.mkdir()
    return root


@pytest.fixture
def settings(scratch_root):
    from vizlint.settings import VizlintSettings

    return VizlintSettings(temp_root=scratch_root)
