"""Local disk asset store — writes uploads under a directory served as static files."""

from pathlib import Path
from uuid import uuid4

import structlog

from assets.port import AssetStore, AssetStoreError, Upload

logger = structlog.get_logger(__name__)


class LocalAssetStore(AssetStore):
    def __init__(self, directory: str | Path, base_url: str):
        self.directory = Path(directory)
        self.base_url = base_url.rstrip("/")

    def upload(self, files: list[Upload]) -> list[str]:
        urls = []
        for file in files:
            name = f"{uuid4().hex[:12]}-{Path(file.filename).name}"
            try:
                self.directory.mkdir(parents=True, exist_ok=True)
                (self.directory / name).write_bytes(file.content)
            except OSError as exc:
                logger.error("Asset upload failed", filename=file.filename, error=str(exc))
                raise AssetStoreError(f"Could not store {file.filename}: {exc}") from exc
            urls.append(f"{self.base_url}/{name}")
        return urls
