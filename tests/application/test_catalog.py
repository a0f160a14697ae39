"""Integration tests for the catalog use cases (add, update, delete, list).

Uses the in-memory fake backend, and the HTTP adapter over an in-process
transport where the wire behaviour matters.
"""

from dataclasses import replace

import httpx
import pytest

from pizzapos.application.add_product import AddProductHandler
from pizzapos.application.delete_product import DeleteProductHandler
from pizzapos.application.list_products import ListProductsHandler
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.application.update_product import UpdateProductHandler
from pizzapos.domain.exceptions import NotFoundError, SubmissionError, ValidationError
from pizzapos.domain.model.product import ProductDraft
from pizzapos.domain.model.value_objects import Money
from tests.fakes import FakePosBackend, connected_setup, http_backend, margherita, pepperoni


class TestAddProduct:

    @pytest.mark.asyncio
    async def test_adds_and_reloads_catalog(self):
        selector, state, backend = connected_setup()
        handler = AddProductHandler(selector, state)

        product = await handler.handle(ProductDraft(name=" Calzone ", price=Money.of("9.50")))

        assert product.id == "100"
        assert product.name == "Calzone"
        assert [p.name for p in state.products] == ["Margherita", "Pepperoni", "Calzone"]
        assert backend.calls[-1] == "list_products"

    @pytest.mark.asyncio
    async def test_blank_name_rejected_without_touching_backend(self):
        selector, state, backend = connected_setup()
        with pytest.raises(ValidationError):
            await AddProductHandler(selector, state).handle(
                ProductDraft(name="", price=Money.of("5"))
            )
        assert backend.calls == []
        assert len(state.products) == 2

    @pytest.mark.asyncio
    async def test_zero_price_rejected(self):
        selector, state, _ = connected_setup()
        with pytest.raises(ValidationError):
            await AddProductHandler(selector, state).handle(
                ProductDraft(name="Veggie", price=Money.of("0"))
            )
        assert len(state.products) == 2

    @pytest.mark.asyncio
    async def test_backend_failure_is_a_submission_error(self):
        selector, state, backend = connected_setup()
        backend.failing.add("create_product")

        with pytest.raises(SubmissionError, match="Could not save product 'Calzone'"):
            await AddProductHandler(selector, state).handle(
                ProductDraft(name="Calzone", price=Money.of("9.50"))
            )
        assert len(state.products) == 2

    @pytest.mark.asyncio
    async def test_failed_reload_keeps_the_saved_product(self, caplog):
        selector, state, backend = connected_setup()
        backend.failing.add("list_products")

        product = await AddProductHandler(selector, state).handle(
            ProductDraft(name="Calzone", price=Money.of("9.50"))
        )

        assert state.products[-1] == product
        assert len(state.products) == 3
        assert "could not be reloaded" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_products_endpoint_is_a_submission_error(self):
        remote = http_backend(lambda request: httpx.Response(404))
        selector = ModeSelector(remote=remote, fallback_factory=FakePosBackend)
        state = PosState(products=[margherita()])

        with pytest.raises(SubmissionError, match="Could not save product"):
            await AddProductHandler(selector, state).handle(
                ProductDraft(name="Calzone", price=Money.of("9.50"))
            )
        assert state.products == [margherita()]


class TestUpdateProduct:

    @pytest.mark.asyncio
    async def test_refreshes_cart_snapshot_keeping_quantity(self):
        selector, state, _ = connected_setup()
        state.cart.add_item(margherita())
        state.cart.set_quantity("1", 2)

        edited = replace(margherita(), name="Margherita Deluxe", price=Money.of("13.99"))
        await UpdateProductHandler(selector, state).handle(edited)

        line = state.cart.get("1")
        assert line.quantity.value == 2
        assert line.product.name == "Margherita Deluxe"
        assert line.product.price == Money.of("13.99")
        assert state.find_product("1").name == "Margherita Deluxe"

    @pytest.mark.asyncio
    async def test_failed_reload_keeps_the_new_price(self):
        selector, state, backend = connected_setup()
        backend.failing.add("list_products")

        await UpdateProductHandler(selector, state).handle(margherita("10.00"))

        assert state.find_product("1").price == Money.of("10.00")
        assert [p.id for p in state.products] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_product_not_in_cart_leaves_cart_alone(self):
        selector, state, _ = connected_setup()
        state.cart.add_item(pepperoni())

        await UpdateProductHandler(selector, state).handle(
            replace(margherita(), price=Money.of("1.00"))
        )

        assert len(state.cart) == 1
        assert state.cart.get("2").product == pepperoni()

    @pytest.mark.asyncio
    async def test_unknown_product_rejected(self):
        selector, state, backend = connected_setup()
        ghost = replace(margherita(), id="999")
        with pytest.raises(NotFoundError, match="'999' not found"):
            await UpdateProductHandler(selector, state).handle(ghost)
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_validation_applies(self):
        selector, state, _ = connected_setup()
        with pytest.raises(ValidationError):
            await UpdateProductHandler(selector, state).handle(replace(margherita(), name=" "))

    @pytest.mark.asyncio
    async def test_backend_failure_leaves_cart_snapshot(self):
        selector, state, backend = connected_setup()
        state.cart.add_item(margherita())
        backend.failing.add("update_product")

        with pytest.raises(SubmissionError):
            await UpdateProductHandler(selector, state).handle(
                replace(margherita(), price=Money.of("1.00"))
            )
        assert state.cart.get("1").product.price == Money.of("12.99")


class TestDeleteProduct:

    @pytest.mark.asyncio
    async def test_removes_product_and_cart_line(self):
        selector, state, _ = connected_setup()
        state.cart.add_item(margherita())
        state.cart.add_item(pepperoni())

        await DeleteProductHandler(selector, state).handle("1")

        assert "1" not in state.cart
        assert "2" in state.cart
        assert [p.id for p in state.products] == ["2"]

    @pytest.mark.asyncio
    async def test_product_absent_from_cart_leaves_cart_unchanged(self):
        selector, state, _ = connected_setup()
        state.cart.add_item(pepperoni())
        before = state.cart.lines

        await DeleteProductHandler(selector, state).handle("1")

        assert state.cart.lines == before

    @pytest.mark.asyncio
    async def test_unknown_product_rejected(self):
        selector, state, _ = connected_setup()
        with pytest.raises(NotFoundError):
            await DeleteProductHandler(selector, state).handle("999")

    @pytest.mark.asyncio
    async def test_backend_failure_keeps_cart_line(self):
        selector, state, backend = connected_setup()
        state.cart.add_item(margherita())
        backend.failing.add("delete_product")

        with pytest.raises(SubmissionError, match="Could not delete"):
            await DeleteProductHandler(selector, state).handle("1")
        assert "1" in state.cart
        assert state.find_product("1") is not None

    @pytest.mark.asyncio
    async def test_failed_reload_drops_the_deleted_product(self):
        selector, state, backend = connected_setup()
        state.cart.add_item(margherita())
        backend.failing.add("list_products")

        await DeleteProductHandler(selector, state).handle("1")

        assert [p.id for p in state.products] == ["2"]
        assert "1" not in state.cart
        with pytest.raises(NotFoundError):
            await DeleteProductHandler(selector, state).handle("1")
        assert backend.calls.count("delete_product") == 1


class TestListProducts:

    def test_lists_everything_without_search(self):
        selector, state, _ = connected_setup()
        assert len(ListProductsHandler(selector, state).handle()) == 2

    def test_search_filters_by_name_or_description(self):
        selector, state, _ = connected_setup()
        handler = ListProductsHandler(selector, state)
        assert [p.name for p in handler.handle("spicy")] == ["Pepperoni"]
        assert [p.name for p in handler.handle("MARG")] == ["Margherita"]
        assert handler.handle("anchovy") == []

    @pytest.mark.asyncio
    async def test_reload_reads_the_backend(self):
        selector, state, _ = connected_setup()
        state.products = []
        products = await ListProductsHandler(selector, state).reload()
        assert len(products) == 2
        assert len(state.products) == 2
