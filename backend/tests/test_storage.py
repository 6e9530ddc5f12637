"""
Product Catalog Backend — Storage Unit Tests
==============================================

What:  Tests for JsonFileProductRepository and InMemoryProductRepository.
How:   Real files in pytest's tmp_path; no mocking of the file system except
       to simulate a failing write.

What we test:
    ✅ Save → load round trip preserves order, values and unknown keys
    ✅ On-disk layout is a 2-space indented JSON array
    ✅ Missing / malformed / non-array files raise StorageError
    ✅ Write failures raise StorageError
    ✅ In-memory repository isolates stored state from loaded snapshots
"""

import json
from unittest.mock import patch

import pytest

from product_catalog.exceptions import StorageError
from product_catalog.schemas.product import Product
from product_catalog.storage import InMemoryProductRepository, JsonFileProductRepository


class TestJsonFileRepository:

    @pytest.mark.asyncio
    async def test_empty_file_loads_empty_list(self, file_repo):
        assert await file_repo.load() == []

    @pytest.mark.asyncio
    async def test_round_trip(self, file_repo, sample_products):
        products = [Product.model_validate(r) for r in sample_products]
        await file_repo.save(products)

        loaded = await file_repo.load()
        assert [p.to_record() for p in loaded] == sample_products

    @pytest.mark.asyncio
    async def test_unknown_keys_survive_round_trip(self, data_file, file_repo):
        records = [{"id": 3, "name": "Aloe", "coverImage": "aloe cover.jpg", "tags": ["succulent"]}]
        data_file.write_text(json.dumps(records), encoding="utf-8")

        await file_repo.save(await file_repo.load())

        assert json.loads(data_file.read_text(encoding="utf-8")) == records

    @pytest.mark.asyncio
    async def test_values_are_not_coerced(self, data_file, file_repo):
        records = [
            {"id": 1, "name": 42, "price": "10"},
            {"id": 2, "name": "Palm", "price": "9.99", "image": None},
            {"id": 3, "name": ["a", "b"], "price": {"amount": 5}},
        ]
        text = json.dumps(records, indent=2)
        data_file.write_text(text, encoding="utf-8")

        await file_repo.save(await file_repo.load())

        assert data_file.read_text(encoding="utf-8") == text

    @pytest.mark.asyncio
    async def test_written_with_two_space_indent(self, data_file, file_repo):
        await file_repo.save([Product(id=1, name="Fern", price=10, image="1.jpg")])

        expected = json.dumps(
            [{"id": 1, "name": "Fern", "price": 10, "image": "1.jpg"}],
            indent=2,
        )
        assert data_file.read_text(encoding="utf-8") == expected

    @pytest.mark.asyncio
    async def test_unset_fields_not_written(self, data_file, file_repo):
        await file_repo.save([Product(id=1, name="Nameless price")])
        assert json.loads(data_file.read_text(encoding="utf-8")) == [
            {"id": 1, "name": "Nameless price"}
        ]

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        repo = JsonFileProductRepository(str(tmp_path / "absent.json"))
        with pytest.raises(StorageError, match="Could not read"):
            await repo.load()

    @pytest.mark.asyncio
    async def test_malformed_json_raises(self, data_file, file_repo):
        data_file.write_text("[{\"id\": 1,", encoding="utf-8")
        with pytest.raises(StorageError, match="malformed"):
            await file_repo.load()

    @pytest.mark.asyncio
    async def test_non_array_raises(self, data_file, file_repo):
        data_file.write_text('{"products": []}', encoding="utf-8")
        with pytest.raises(StorageError, match="malformed"):
            await file_repo.load()

    @pytest.mark.asyncio
    async def test_record_without_id_raises(self, data_file, file_repo):
        data_file.write_text('[{"name": "Orphan"}]', encoding="utf-8")
        with pytest.raises(StorageError, match="malformed"):
            await file_repo.load()

    @pytest.mark.asyncio
    async def test_write_failure_raises(self, file_repo):
        with patch("product_catalog.storage.aiofiles.open", side_effect=PermissionError("read-only")):
            with pytest.raises(StorageError, match="Could not write"):
                await file_repo.save([Product(id=1)])


class TestInMemoryRepository:

    @pytest.mark.asyncio
    async def test_round_trip(self, memory_repo, sample_products):
        await memory_repo.save([Product.model_validate(r) for r in sample_products])
        loaded = await memory_repo.load()
        assert [p.to_record() for p in loaded] == sample_products

    @pytest.mark.asyncio
    async def test_loaded_snapshot_is_detached(self, sample_products):
        repo = InMemoryProductRepository(sample_products)

        products = await repo.load()
        products.pop()
        products[0].name = "Changed"

        assert repo.records == sample_products
