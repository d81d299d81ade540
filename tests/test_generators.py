"""Örnek veri üretici unit testleri."""

from data_layer.generators.generators import generate_dataset, seed_repository
from src.analytics.statistics import compute_statistics
from src.repository import InMemoryStockRepository


class TestGenerateDataset:
    def test_is_deterministic(self):
        assert generate_dataset(seed=7) == generate_dataset(seed=7)

    def test_sizes(self):
        dataset = generate_dataset()
        assert len(dataset["suppliers"]) == 8
        assert len(dataset["items"]) == 30
        assert dataset["entries"]


class TestSeedRepository:
    def test_stock_never_negative(self):
        repo = InMemoryStockRepository()
        seed_repository(repo, generate_dataset())
        items = repo.list_stock_items()
        assert len(items) == 30
        assert all(item.current_stock >= 0 for item in items)

    def test_dashboard_has_problem_scenarios(self):
        repo = InMemoryStockRepository()
        seed_repository(repo, generate_dataset())
        stats = compute_statistics(repo.list_stock_items())
        assert stats.total_items == 30
        assert stats.items_low_stock + stats.items_out_of_stock > 0
