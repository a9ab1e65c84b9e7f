"""Integration tests for the CartStore.

Uses in-memory fake repositories, no file I/O.
"""

from storefront.application.cart_store import CartStore
from storefront.domain.model.cart import CartEventType
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import StoredCartLine
from storefront.domain.service.price_breaks import discount_percent
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    make_product,
    product_a,
)


def _setup(
    lines: list[StoredCartLine] | None = None,
) -> tuple[CartStore, FakeCartRepository, FakeProductRepository]:
    """Build a store over fake repos holding product A and a plain product."""
    product_repo = FakeProductRepository([
        product_a(),
        make_product(id=2, name="Gloves", base_price="50", stock=100),
    ])
    cart_repo = FakeCartRepository(lines)
    store = CartStore(cart_repo, product_repo)
    return store, cart_repo, product_repo


class TestCartStoreScenarios:

    def test_volume_break_after_two_additions(self):
        store, _, products = _setup()
        a = products.get_by_id(1)
        store.add_to_cart(a, 3)
        store.add_to_cart(a, 4)

        item = store.get_item(1)
        assert item.quantity == 7
        assert item.unit_price == Money.of("900")
        assert item.line_total == Money.of("6300")
        assert discount_percent(a, item.quantity) == 10

    def test_oversized_add_clamped_to_stock(self):
        store, _, products = _setup()
        event = store.add_to_cart(products.get_by_id(1), 20)
        assert store.get_item(1).quantity == 10
        assert event.type is CartEventType.CAPPED

    def test_grand_total_uses_price_breaks(self):
        store, _, products = _setup()
        store.add_to_cart(products.get_by_id(1), 10)
        store.add_to_cart(products.get_by_id(2), 3)
        assert store.total_items == 13
        assert store.grand_total == Money.of("8150")


class TestCartStorePersistence:

    def test_every_mutation_persists_ids_and_quantities(self):
        store, cart_repo, products = _setup()
        store.add_to_cart(products.get_by_id(1), 2)
        store.add_to_cart(products.get_by_id(2), 5)
        assert cart_repo.lines == [StoredCartLine(1, 2), StoredCartLine(2, 5)]

        store.update_quantity(1, 4)
        store.remove_from_cart(2)
        assert cart_repo.lines == [StoredCartLine(1, 4)]
        assert cart_repo.save_count == 4

    def test_hydrates_from_storage(self):
        store, _, _ = _setup([StoredCartLine(2, 3), StoredCartLine(1, 6)])
        assert [(i.product_id, i.quantity) for i in store.items] == [(2, 3), (1, 6)]

    def test_hydration_drops_unknown_products(self):
        store, _, _ = _setup([StoredCartLine(99, 3), StoredCartLine(1, 2)])
        assert [i.product_id for i in store.items] == [1]

    def test_hydration_clamps_to_current_stock(self):
        store, _, _ = _setup([StoredCartLine(1, 40)])
        assert store.get_item(1).quantity == 10

    def test_clear_is_persisted(self):
        store, cart_repo, products = _setup()
        store.add_to_cart(products.get_by_id(1), 2)
        store.clear_cart()

        rehydrated = CartStore(cart_repo, products)
        assert rehydrated.items == ()

    def test_write_failure_keeps_in_memory_state(self):
        store, cart_repo, products = _setup()
        cart_repo.fail_writes = True
        event = store.add_to_cart(products.get_by_id(1), 2)
        assert event.type is CartEventType.ADDED
        assert store.get_item(1).quantity == 2

    def test_negative_update_rejected_without_write(self):
        store, cart_repo, products = _setup()
        store.add_to_cart(products.get_by_id(1), 2)
        assert store.update_quantity(1, -3) is None
        assert store.get_item(1).quantity == 2
        assert cart_repo.save_count == 1


class TestCartStoreSubscriptions:

    def test_listener_sees_settled_snapshot(self):
        store, cart_repo, products = _setup()
        seen = []
        store.subscribe(
            lambda event: seen.append((event.type, store.total_items, list(cart_repo.lines)))
        )
        store.add_to_cart(products.get_by_id(1), 3)
        assert seen == [(CartEventType.ADDED, 3, [StoredCartLine(1, 3)])]

    def test_unsubscribe_stops_notifications(self):
        store, _, products = _setup()
        seen = []
        unsubscribe = store.subscribe(seen.append)
        store.add_to_cart(products.get_by_id(1))
        unsubscribe()
        store.clear_cart()
        assert [e.type for e in seen] == [CartEventType.ADDED]

    def test_noop_remove_does_not_notify(self):
        store, _, _ = _setup()
        seen = []
        store.subscribe(seen.append)
        assert store.remove_from_cart(42) is None
        assert seen == []

    def test_failing_listener_does_not_break_store(self):
        store, _, products = _setup()
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(seen.append)
        store.add_to_cart(products.get_by_id(1), 1)
        assert len(seen) == 1
        assert store.get_item(1).quantity == 1

    def test_snapshot_is_not_affected_by_later_mutations(self):
        store, _, products = _setup()
        store.add_to_cart(products.get_by_id(1), 1)
        snapshot = store.items
        store.add_to_cart(products.get_by_id(1), 1)
        assert snapshot[0].quantity == 1
        assert store.items[0].quantity == 2
