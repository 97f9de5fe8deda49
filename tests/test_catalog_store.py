# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from protein_tracker.catalog.models import SEED_PRODUCTS, ProductDraft, UnitName
from protein_tracker.catalog.storage import KeyValueCatalogStorage, MemoryCatalogStorage
from protein_tracker.catalog.store import CatalogStore
from protein_tracker.local_store import JsonKeyValueStore


def _fixed_clock(value: int = 1700000000000):
    return lambda: value


class TestCatalogStore(unittest.TestCase):
    def test_seeds_when_nothing_stored(self) -> None:
        store = CatalogStore(MemoryCatalogStorage())
        self.assertEqual([p.id for p in store.products], ["huaxia-2", "niubeifu", "huaxia-protein"])
        self.assertEqual(store.products[0].name, "华夏 2号")
        self.assertEqual(store.products[2].unit_name, UnitName.sachet)

    def test_corrupt_snapshot_falls_back_to_seeds(self) -> None:
        for raw in ("{not json", json.dumps({"a": 1}), json.dumps([{"id": "x"}])):
            with self.subTest(raw=raw):
                store = CatalogStore(MemoryCatalogStorage(raw))
                self.assertEqual(store.products, SEED_PRODUCTS)

    def test_duplicate_ids_fall_back_to_seeds(self) -> None:
        record = {"id": "custom-1", "name": "乳清", "proteinPercentage": 75, "unitWeight": 30, "unitName": "勺"}
        store = CatalogStore(MemoryCatalogStorage(json.dumps([record, record], ensure_ascii=False)))
        self.assertEqual(store.products, SEED_PRODUCTS)

    def test_empty_snapshot_is_an_empty_catalog(self) -> None:
        storage = MemoryCatalogStorage("[]")
        store = CatalogStore(storage)
        self.assertEqual(store.products, [])
        self.assertEqual(json.loads(storage.raw or "null"), [])

    def test_restores_snapshot(self) -> None:
        raw = json.dumps(
            [
                {
                    "id": "custom-5",
                    "name": "乳清",
                    "proteinPercentage": 75,
                    "unitWeight": 30,
                    "unitName": "勺",
                }
            ],
            ensure_ascii=False,
        )
        store = CatalogStore(MemoryCatalogStorage(raw))
        self.assertEqual(len(store.products), 1)
        self.assertEqual(store.products[0].unit_weight, 30)

    def test_blank_name_ignored(self) -> None:
        storage = MemoryCatalogStorage()
        store = CatalogStore(storage)
        saves = storage.save_count
        for name in ("", "   ", "\t\n"):
            self.assertIsNone(store.add(ProductDraft(name=name)))
        self.assertEqual(len(store.products), 3)
        self.assertEqual(storage.save_count, saves)

    def test_add_assigns_unique_ids_and_snapshots(self) -> None:
        storage = MemoryCatalogStorage()
        store = CatalogStore(storage, clock=_fixed_clock())
        first = store.add(ProductDraft(name="澳洲A2", protein_percentage=20, unit_weight=8))
        second = store.add(ProductDraft(name="澳洲A2"))
        assert first is not None and second is not None
        self.assertEqual(first.id, "custom-1700000000000")
        self.assertEqual(second.id, "custom-1700000000001")
        self.assertEqual(store.products[-1], second)

        saved = json.loads(storage.raw or "[]")
        self.assertEqual(len(saved), 5)
        self.assertEqual(
            saved[3],
            {
                "id": "custom-1700000000000",
                "name": "澳洲A2",
                "proteinPercentage": 20.0,
                "unitWeight": 8.0,
                "unitName": "勺",
            },
        )

    def test_remove(self) -> None:
        store = CatalogStore(MemoryCatalogStorage(), clock=_fixed_clock())
        product = store.add(ProductDraft(name="自定义"))
        assert product is not None
        self.assertTrue(store.remove(product.id))
        self.assertIsNone(store.get(product.id))
        self.assertFalse(store.remove(product.id))

    def test_seed_products_protected(self) -> None:
        store = CatalogStore(MemoryCatalogStorage())
        for product in SEED_PRODUCTS:
            self.assertTrue(store.is_protected(product.id))
            self.assertFalse(store.remove(product.id))
        self.assertEqual(len(store.products), 3)


class TestKeyValueCatalogStorage(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="protein-test-"))
        self.path = self._tmp / "nested" / "local_storage.json"

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_snapshot_survives_restart(self) -> None:
        kv = JsonKeyValueStore(self.path)
        store = CatalogStore(KeyValueCatalogStorage(kv, "milk_powders"), clock=_fixed_clock())
        store.add(ProductDraft(name="澳洲A2", unit_name=UnitName.gram))

        raw = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(list(raw.keys()), ["milk_powders"])
        self.assertIsInstance(raw["milk_powders"], str)

        reloaded = CatalogStore(KeyValueCatalogStorage(JsonKeyValueStore(self.path), "milk_powders"))
        self.assertEqual([p.id for p in reloaded.products][-1], "custom-1700000000000")
        self.assertEqual(reloaded.products[-1].unit_name, UnitName.gram)

    def test_unreadable_file_seeds(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("garbage", encoding="utf-8")
        store = CatalogStore(KeyValueCatalogStorage(JsonKeyValueStore(self.path), "milk_powders"))
        self.assertEqual(store.products, SEED_PRODUCTS)

    def test_other_keys_preserved(self) -> None:
        kv = JsonKeyValueStore(self.path)
        kv.set("theme", "dark")
        CatalogStore(KeyValueCatalogStorage(kv, "milk_powders"))
        self.assertEqual(kv.get("theme"), "dark")
        kv.delete("theme")
        self.assertIsNone(kv.get("theme"))
        self.assertIsNotNone(kv.get("milk_powders"))


if __name__ == "__main__":
    unittest.main()
