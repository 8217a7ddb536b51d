"""Fake asset store — keeps uploads in memory for testing."""

from uuid import uuid4

from assets.port import AssetStore, AssetStoreError, Upload


class FakeAssetStore(AssetStore):
    def __init__(self, base_url: str = "https://cdn.example.com/storefront"):
        self.base_url = base_url.rstrip("/")
        self.stored: dict[str, Upload] = {}
        self.should_succeed = True
        self.failure_reason = "Upload rejected"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Upload rejected"):
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def upload(self, files: list[Upload]) -> list[str]:
        if not self.should_succeed:
            raise AssetStoreError(self.failure_reason)

        urls = []
        for file in files:
            url = f"{self.base_url}/{uuid4().hex[:12]}-{file.filename}"
            self.stored[url] = file
            urls.append(url)
        return urls

    def reset(self):
        self.stored.clear()
        self.should_succeed = True
        self.failure_reason = "Upload rejected"
