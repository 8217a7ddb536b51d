import pytest
from assets import reset_asset_store, set_asset_store
from assets.fake_store import FakeAssetStore


@pytest.fixture
def asset_store():
    store = FakeAssetStore(base_url="https://cdn.test/uploads")
    set_asset_store(store)
    yield store
    reset_asset_store()
