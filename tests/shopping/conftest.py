import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def shopping_bed():
    from shopping.domain import shopping

    bed = DomainFixture(shopping)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shopping_bed):
    with shopping_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def make_product():
    """Factory that stores a catalogue product with optional offers."""
    from shopping.catalogue.product import Offer, Product

    def _make(price=100, stock_quantity=3, offers=(), is_deleted=False, title="Test Product"):
        product = Product(title=title, price=price, stock_quantity=stock_quantity, is_deleted=is_deleted)
        for discount, status in offers:
            product.add_offers(Offer(discount=discount, status=status))
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    return _make
