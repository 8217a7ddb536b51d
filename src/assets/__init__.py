"""Asset store factory.

Provides get_asset_store() / set_asset_store() to swap implementations:
- FakeAssetStore for development and testing (ASSET_STORE=fake, default)
- LocalAssetStore writing to ASSET_DIR, served under ASSET_BASE_URL (ASSET_STORE=local)
"""

import os

from assets.port import AssetStore

_current_store: AssetStore | None = None


def get_asset_store() -> AssetStore:
    """Return the current asset store. Defaults to the configured adapter."""
    global _current_store
    if _current_store is None:
        adapter = os.environ.get("ASSET_STORE", "fake")
        if adapter == "fake":
            from assets.fake_store import FakeAssetStore

            _current_store = FakeAssetStore()
        elif adapter == "local":
            from assets.local_store import LocalAssetStore

            _current_store = LocalAssetStore(
                directory=os.environ.get("ASSET_DIR", "static/uploads"),
                base_url=os.environ.get("ASSET_BASE_URL", "/static/uploads"),
            )
        else:
            raise ValueError(f"Unknown asset store: {adapter}")
    return _current_store


def set_asset_store(store: AssetStore) -> None:
    """Override the active asset store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_asset_store() -> None:
    """Reset to the default asset store."""
    global _current_store
    _current_store = None
