import pytest
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.dispatcher import NotificationDispatcher
from protean.integrations.pytest import DomainFixture

ADMIN_EMAIL = "owner@storefront.test"


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def email_channel(_ctx):
    """Route order notifications through a fresh fake email adapter."""
    from ordering.order.notification import set_dispatcher

    channel = FakeEmailAdapter()
    set_dispatcher(
        NotificationDispatcher(
            channel=channel,
            admin_email=ADMIN_EMAIL,
            store_name="Test Store",
            timeout=1.0,
        )
    )
    yield channel
    set_dispatcher(None)
