"""Tests for the client-resident shopping cart."""

from ordering.cart.cart import Cart, CartChange, CartItem
from ordering.cart.storage import InMemoryCartSlot


def _item(**overrides):
    defaults = {
        "product_id": "prod-001",
        "name": "Home Jersey",
        "price": 45.0,
        "image": "/img/home.jpg",
        "size": "M",
        "color": "Red",
        "quantity": 1,
    }
    defaults.update(overrides)
    return CartItem(**defaults)


class TestCartAdd:
    def test_add_new_item(self):
        cart = Cart()
        notice = cart.add(_item())
        assert notice.change == CartChange.ADDED
        assert notice.message == "Added Home Jersey to cart"
        assert len(cart.items) == 1

    def test_add_same_key_merges_quantity(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        notice = cart.add(_item(quantity=3))
        assert notice.change == CartChange.UPDATED
        assert notice.message == "Updated quantity for Home Jersey"
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_different_size_is_separate_entry(self):
        cart = Cart()
        cart.add(_item(size="M"))
        cart.add(_item(size="L"))
        assert len(cart.items) == 2

    def test_different_color_is_separate_entry(self):
        cart = Cart()
        cart.add(_item(color="Red"))
        cart.add(_item(color="Blue"))
        assert len(cart.items) == 2

    def test_merge_keeps_original_snapshot(self):
        cart = Cart()
        cart.add(_item(price=45.0))
        cart.add(_item(price=50.0))
        assert cart.items[0].price == 45.0


class TestCartAddQuantityGuard:
    def test_zero_quantity_on_empty_cart_is_ignored(self):
        cart = Cart()
        assert cart.add(_item(quantity=0)) is None
        assert cart.is_empty()

    def test_negative_quantity_on_empty_cart_is_ignored(self):
        cart = Cart()
        assert cart.add(_item(quantity=-2)) is None
        assert cart.is_empty()

    def test_zero_quantity_does_not_touch_existing_line(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        cart.add(_item(quantity=0))
        assert cart.items[0].quantity == 2

    def test_negative_quantity_does_not_reduce_existing_line(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        cart.add(_item(quantity=-5))
        assert cart.items[0].quantity == 2

    def test_ignored_add_keeps_saved_cart_readable(self):
        storage = {}
        cart = Cart(InMemoryCartSlot(storage))
        cart.add(_item(product_id="prod-001", quantity=3))
        cart.add(_item(product_id="prod-002", quantity=0))

        reloaded = Cart(InMemoryCartSlot(storage))
        assert len(reloaded.items) == 1
        assert reloaded.items[0].product_id == "prod-001"
        assert reloaded.items[0].quantity == 3


class TestCartDerivedFigures:
    def test_empty_cart(self):
        cart = Cart()
        assert cart.is_empty()
        assert cart.count == 0
        assert cart.total == 0

    def test_count_sums_quantities(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        cart.add(_item(product_id="prod-002", quantity=3))
        assert cart.count == 5

    def test_total_sums_line_totals(self):
        cart = Cart()
        cart.add(_item(price=45.0, quantity=2))
        cart.add(_item(product_id="prod-002", price=12.5, quantity=1))
        assert cart.total == 102.5


class TestCartRemove:
    def test_remove_matching_key(self):
        cart = Cart()
        cart.add(_item())
        notice = cart.remove("prod-001", "M", "Red")
        assert notice.change == CartChange.REMOVED
        assert notice.message == "Item removed from cart"
        assert cart.is_empty()

    def test_remove_requires_full_key(self):
        cart = Cart()
        cart.add(_item(size="M"))
        cart.add(_item(size="L"))
        cart.remove("prod-001", "L", "Red")
        assert [i.size for i in cart.items] == ["M"]

    def test_remove_absent_key_is_noop(self):
        cart = Cart()
        cart.add(_item())
        cart.remove("prod-999", "M", "Red")
        assert len(cart.items) == 1


class TestCartSetQuantity:
    def test_overwrites_quantity(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        cart.set_quantity("prod-001", "M", "Red", 7)
        assert cart.items[0].quantity == 7

    def test_quantity_below_one_is_ignored(self):
        cart = Cart()
        cart.add(_item(quantity=2))
        cart.set_quantity("prod-001", "M", "Red", 0)
        cart.set_quantity("prod-001", "M", "Red", -3)
        assert cart.items[0].quantity == 2

    def test_absent_item_is_ignored(self):
        cart = Cart()
        cart.set_quantity("prod-001", "M", "Red", 4)
        assert cart.is_empty()


class TestCartPersistence:
    def test_mutations_are_written_to_slot(self):
        storage = {}
        cart = Cart(InMemoryCartSlot(storage))
        cart.add(_item(quantity=2))

        reloaded = Cart(InMemoryCartSlot(storage))
        assert len(reloaded.items) == 1
        assert reloaded.items[0].quantity == 2
        assert reloaded.items[0].key == ("prod-001", "M", "Red")

    def test_clear_empties_slot(self):
        storage = {}
        cart = Cart(InMemoryCartSlot(storage))
        cart.add(_item())
        cart.clear()
        assert Cart(InMemoryCartSlot(storage)).is_empty()

    def test_corrupt_slot_is_discarded(self):
        storage = {"cartItems": "{not json"}
        cart = Cart(InMemoryCartSlot(storage))
        assert cart.is_empty()
        assert "cartItems" not in storage

    def test_entry_missing_fields_is_discarded(self):
        storage = {"cartItems": '[{"name": "No id"}]'}
        cart = Cart(InMemoryCartSlot(storage))
        assert cart.is_empty()
        assert "cartItems" not in storage

    def test_non_positive_quantity_is_discarded(self):
        storage = {
            "cartItems": '[{"product_id": "p1", "name": "X", "price": 1.0, "image": "", '
            '"size": "M", "color": "Red", "quantity": 0}]'
        }
        cart = Cart(InMemoryCartSlot(storage))
        assert cart.is_empty()
