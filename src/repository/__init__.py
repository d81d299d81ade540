from src.repository.base import RecordNotFoundError, StockRepository
from src.repository.dynamodb import DynamoDBStockRepository
from src.repository.memory import InMemoryStockRepository

__all__ = [
    "DynamoDBStockRepository",
    "InMemoryStockRepository",
    "RecordNotFoundError",
    "StockRepository",
]
