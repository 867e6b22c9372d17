"""
Tests for the catalog application layer (use cases).

Tests use cases with a fake or mocked repository port.
No real infrastructure needed.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from product_service.application.catalog.create_product import CreateProductUseCase
from product_service.application.catalog.delete_product import DeleteProductUseCase
from product_service.application.catalog.dtos import (
    CreateProductCommand,
    ListProductsQuery,
    UpdateProductCommand,
)
from product_service.application.catalog.get_product import GetProductUseCase
from product_service.application.catalog.list_products import (
    ListProductsUseCase,
    normalize_pagination,
)
from product_service.application.catalog.update_product import UpdateProductUseCase
from product_service.domain.catalog.errors import (
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
    ProductOperationTimeoutError,
    ProductPersistenceError,
)
from product_service.domain.catalog.ports import ProductRepository


def _create_command(**overrides) -> CreateProductCommand:
    values = {
        "store_id": 1,
        "name": "Test Product",
        "description": "Test Description",
        "amount": 10,
        "price": Decimal("29.99"),
    }
    values.update(overrides)
    return CreateProductCommand(**values)


def _update_command(**overrides) -> UpdateProductCommand:
    values = {
        "store_id": 2,
        "name": "Renamed Product",
        "description": None,
        "amount": 5,
        "price": Decimal("19.50"),
    }
    values.update(overrides)
    return UpdateProductCommand(**values)


class TestCreateProductUseCase:
    """Tests for the CreateProductUseCase."""

    def test_creates_product(self, fake_repo) -> None:
        """Valid command is stored and returned with server-assigned fields."""
        result = CreateProductUseCase(fake_repo).execute(_create_command())

        assert result.id == 1
        assert result.name == "Test Product"
        assert result.description == "Test Description"
        assert result.price == Decimal("29.99")
        assert result.created_at == result.updated_at
        assert 1 in fake_repo.rows

    def test_invalid_product_never_reaches_repository(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        with pytest.raises(InvalidProductError, match="price must be positive"):
            CreateProductUseCase(repo).execute(_create_command(price=Decimal("0")))
        repo.create.assert_not_called()

    def test_long_name_rejected(self, fake_repo) -> None:
        with pytest.raises(InvalidProductError):
            CreateProductUseCase(fake_repo).execute(_create_command(name="x" * 101))
        assert fake_repo.rows == {}

    def test_domain_errors_propagate_unchanged(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        duplicate = DuplicateProductError("Test Product")
        repo.create.side_effect = duplicate

        with pytest.raises(DuplicateProductError) as exc_info:
            CreateProductUseCase(repo).execute(_create_command())
        assert exc_info.value is duplicate

    def test_unclassified_errors_are_wrapped(self) -> None:
        """Raw adapter failures surface as ProductPersistenceError."""
        repo = MagicMock(spec=ProductRepository)
        repo.create.side_effect = RuntimeError("connection reset")

        with pytest.raises(ProductPersistenceError) as exc_info:
            CreateProductUseCase(repo).execute(_create_command())
        assert exc_info.value.operation == "create"
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestGetProductUseCase:
    """Tests for the GetProductUseCase."""

    def test_returns_existing_product(self, fake_repo) -> None:
        created = CreateProductUseCase(fake_repo).execute(_create_command())
        result = GetProductUseCase(fake_repo).execute(created.id)
        assert result == created

    @pytest.mark.parametrize("product_id", [0, -1])
    def test_non_positive_id_rejected(self, product_id: int) -> None:
        repo = MagicMock(spec=ProductRepository)
        with pytest.raises(InvalidProductError, match="invalid product ID"):
            GetProductUseCase(repo).execute(product_id)
        repo.get_by_id.assert_not_called()

    def test_missing_product_raises_not_found(self, fake_repo) -> None:
        with pytest.raises(ProductNotFoundError):
            GetProductUseCase(fake_repo).execute(999)


class TestListProductsUseCase:
    """Tests for the ListProductsUseCase."""

    @pytest.mark.parametrize(
        ("limit", "offset", "expected"),
        [
            (0, 0, (10, 0)),
            (-3, 0, (10, 0)),
            (10, 0, (10, 0)),
            (100, 0, (100, 0)),
            (101, 0, (100, 0)),
            (500, 0, (100, 0)),
            (20, -5, (20, 0)),
            (20, 40, (20, 40)),
        ],
    )
    def test_normalize_pagination(self, limit: int, offset: int, expected) -> None:
        assert normalize_pagination(limit, offset) == expected

    @pytest.mark.parametrize(
        ("requested", "equivalent"),
        [
            (ListProductsQuery(limit=0), ListProductsQuery(limit=10)),
            (ListProductsQuery(limit=500), ListProductsQuery(limit=100)),
            (ListProductsQuery(offset=-5), ListProductsQuery(offset=0)),
        ],
    )
    def test_out_of_range_values_behave_like_corrected_ones(
        self, requested: ListProductsQuery, equivalent: ListProductsQuery
    ) -> None:
        repo = MagicMock(spec=ProductRepository)
        repo.get_all.return_value = []
        use_case = ListProductsUseCase(repo)

        first = use_case.execute(requested)
        second = use_case.execute(equivalent)

        assert first == second
        assert repo.get_all.call_args_list[0] == repo.get_all.call_args_list[1]

    def test_returns_page_most_recent_first(self, fake_repo) -> None:
        create = CreateProductUseCase(fake_repo)
        for i in range(3):
            create.execute(_create_command(name=f"Product {i}"))

        page = ListProductsUseCase(fake_repo).execute(ListProductsQuery(limit=2))

        assert [p.name for p in page.products] == ["Product 2", "Product 1"]
        assert page.limit == 2
        assert page.offset == 0

    def test_empty_store_is_not_an_error(self, fake_repo) -> None:
        page = ListProductsUseCase(fake_repo).execute(ListProductsQuery())
        assert page.products == []

    def test_unclassified_errors_are_wrapped(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        repo.get_all.side_effect = ValueError("bad row")
        with pytest.raises(ProductPersistenceError):
            ListProductsUseCase(repo).execute(ListProductsQuery())

    def test_timeout_propagates(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        repo.get_all.side_effect = ProductOperationTimeoutError("list")
        with pytest.raises(ProductOperationTimeoutError):
            ListProductsUseCase(repo).execute(ListProductsQuery())


class TestUpdateProductUseCase:
    """Tests for the UpdateProductUseCase."""

    def test_full_replace_preserves_identity(self, fake_repo) -> None:
        created = CreateProductUseCase(fake_repo).execute(_create_command())

        updated = UpdateProductUseCase(fake_repo).execute(created.id, _update_command())

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at
        assert updated.store_id == 2
        assert updated.name == "Renamed Product"
        assert updated.description is None
        assert updated.price == Decimal("19.50")

    def test_non_positive_id_rejected(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        with pytest.raises(InvalidProductError):
            UpdateProductUseCase(repo).execute(0, _update_command())
        repo.update.assert_not_called()

    def test_invalid_replacement_rejected(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        with pytest.raises(InvalidProductError, match="amount must be non-negative"):
            UpdateProductUseCase(repo).execute(1, _update_command(amount=-1))
        repo.update.assert_not_called()

    def test_missing_product_raises_not_found(self, fake_repo) -> None:
        with pytest.raises(ProductNotFoundError):
            UpdateProductUseCase(fake_repo).execute(7, _update_command())


class TestDeleteProductUseCase:
    """Tests for the DeleteProductUseCase."""

    def test_deleted_product_is_gone(self, fake_repo) -> None:
        created = CreateProductUseCase(fake_repo).execute(_create_command())

        DeleteProductUseCase(fake_repo).execute(created.id)

        with pytest.raises(ProductNotFoundError):
            GetProductUseCase(fake_repo).execute(created.id)

    def test_second_delete_raises_not_found(self, fake_repo) -> None:
        created = CreateProductUseCase(fake_repo).execute(_create_command())
        use_case = DeleteProductUseCase(fake_repo)
        use_case.execute(created.id)

        with pytest.raises(ProductNotFoundError):
            use_case.execute(created.id)

    def test_non_positive_id_rejected(self) -> None:
        repo = MagicMock(spec=ProductRepository)
        with pytest.raises(InvalidProductError):
            DeleteProductUseCase(repo).execute(-4)
        repo.delete.assert_not_called()
