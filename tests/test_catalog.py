"""Tests for the catalog service and repositories"""
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from tranex.services.domains import CatalogService, ProductQuery, sort_option_to_query
from tranex.services.mock_catalog import category_name_from_slug, mock_products, query_mock_products
from tranex.services.repositories import CategoryRepository, ProductRepository, ReviewRepository


@pytest.mark.parametrize("option,expected", [
    ("newest", ("created_at", "desc")),
    ("oldest", ("created_at", "asc")),
    ("price-low", ("price", "asc")),
    ("price-high", ("price", "desc")),
    ("bogus", ("created_at", "desc")),
])
def test_sort_option_to_query(option, expected):
    assert sort_option_to_query(option) == expected


def test_product_query_from_sort_option():
    query = ProductQuery.from_sort_option("price-low", page=3, per_page=6, category="all", search="  pro ")

    assert query.sort_by == "price"
    assert query.sort_direction == "asc"
    assert query.offset == 12
    assert query.limit == 6
    assert query.category is None
    assert query.search == "pro"


def test_mock_products_shape():
    products = mock_products(12)

    assert len(products) == 12
    assert products[0].id == "product-1"
    assert products[0].price == Decimal("149.99")
    assert products[0].discount_percent == 17
    assert products[0].main_image == "/src/assets/images/products/product-1.jpg"


def test_query_mock_products_filters_sorts_and_paginates():
    slug = "accessories"
    products = query_mock_products(category=slug, sort_by="price", sort_direction="asc", limit=2)

    assert [p.category for p in products] == [category_name_from_slug(slug)] * 2
    assert products[0].price < products[1].price

    second_page = query_mock_products(sort_by="price", sort_direction="desc", limit=6, offset=6)
    assert len(second_page) == 6
    assert second_page[0].id == "product-6"


def test_category_name_from_unknown_slug():
    assert category_name_from_slug("nope") == ""


@pytest.mark.asyncio
async def test_create_without_supabase_uses_mock():
    catalog = await CatalogService.create()

    assert catalog.uses_mock
    products = await catalog.load_products(ProductQuery.from_sort_option("newest"))
    assert len(products) == 6
    assert products[0].id == "product-12"


@pytest.mark.asyncio
async def test_mock_catalog_lookups():
    catalog = CatalogService()

    assert (await catalog.load_product("product-3")).name.endswith("Pro 3")
    assert await catalog.load_product("missing") is None
    assert len(await catalog.load_categories()) == 4
    assert len(await catalog.load_reviews("product-3")) == 3
    related = await catalog.load_related("product-1")
    assert len(related) == 4
    assert all(p.id != "product-1" for p in related)


@pytest.mark.asyncio
async def test_load_products_from_supabase(mock_supabase_client, sample_product_row):
    table = mock_supabase_client.table.return_value
    table.execute.return_value = Mock(data=[sample_product_row])
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    query = ProductQuery(category="flywheel-training", sort_by="price", sort_direction="asc", limit=6, offset=6)
    products = await catalog.load_products(query)

    assert len(products) == 1
    assert products[0].price == Decimal("899")
    mock_supabase_client.table.assert_called_with("products")
    table.eq.assert_any_call("category", "flywheel-training")
    table.order.assert_called_with("price", desc=False)
    table.range.assert_called_with(6, 11)
    assert catalog.is_loading is False
    assert catalog.last_error is None


@pytest.mark.asyncio
async def test_load_products_with_search(mock_supabase_client):
    table = mock_supabase_client.table.return_value
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    await catalog.load_products(ProductQuery(search="flywheel"))

    table.ilike.assert_called_once_with("name", "%flywheel%")


@pytest.mark.asyncio
async def test_load_products_failure_returns_empty(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=RuntimeError("network down"))
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    products = await catalog.load_products()

    assert products == []
    assert catalog.last_error == "network down"
    assert catalog.error_message() is not None
    assert catalog.is_loading is False


@pytest.mark.asyncio
async def test_load_product_by_id(mock_supabase_client, sample_product_row):
    table = mock_supabase_client.table.return_value
    table.execute.return_value = Mock(data=[sample_product_row])
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    product = await catalog.load_product("product-1")

    assert product is not None
    assert product.discount_percent == 10
    table.eq.assert_called_with("id", "product-1")


@pytest.mark.asyncio
async def test_load_product_not_found(mock_supabase_client):
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    assert await catalog.load_product("missing") is None
    assert catalog.last_error is None


@pytest.mark.asyncio
async def test_load_product_failure_returns_none(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=RuntimeError("timeout"))
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    assert await catalog.load_product("product-1") is None
    assert catalog.last_error == "timeout"


@pytest.mark.asyncio
async def test_load_related_excludes_product(mock_supabase_client):
    table = mock_supabase_client.table.return_value
    catalog = CatalogService(products=ProductRepository(mock_supabase_client))

    await catalog.load_related("product-1", limit=3)

    table.neq.assert_called_once_with("id", "product-1")
    table.limit.assert_called_with(3)


@pytest.mark.asyncio
async def test_load_categories_and_reviews(mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.execute.side_effect = [
        Mock(data=[{"id": 1, "name": "Accessories", "slug": "accessories", "sort_order": 4}]),
        Mock(data=[{"id": 7, "product_id": "product-1", "user_name": "Ali", "rating": 4.5,
                    "comment": "Solid", "created_at": "2024-02-01T10:00:00Z"}]),
    ]
    catalog = CatalogService(
        categories=CategoryRepository(mock_supabase_client),
        reviews=ReviewRepository(mock_supabase_client),
    )

    categories = await catalog.load_categories()
    reviews = await catalog.load_reviews("product-1")

    assert categories[0].slug == "accessories"
    assert reviews[0].rating == 4.5
    table.order.assert_called_with("created_at", desc=True)


@pytest.mark.asyncio
async def test_load_categories_failure_returns_empty(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=RuntimeError("500"))
    catalog = CatalogService(categories=CategoryRepository(mock_supabase_client))

    assert await catalog.load_categories() == []
