"""DynamoDB kayıt deposu - boto3 ile StockRepository implementasyonu.

Tablolar (önek ile): StockItems, StockEntries, StockExits, Suppliers, Counters.
Id'ler Counters tablosunda atomik ADD ile üretilir. DynamoDB float kabul
etmediği için sayılar Decimal olarak yazılır ve okurken geri çevrilir.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

from src.models.inventory import (
    EntryStatus,
    ExitStatus,
    ExitUrgency,
    StockEntry,
    StockExit,
    StockItem,
    StockItemStatus,
    Supplier,
    SupplierReliability,
    SupplierStatus,
)
from src.repository.base import (
    ENTRIES,
    EXITS,
    ITEMS,
    SUPPLIERS,
    RecordNotFoundError,
    StockRepository,
    compute_current_stock,
)

logger = logging.getLogger(__name__)

TABLE_NAMES = {
    ITEMS: "StockItems",
    ENTRIES: "StockEntries",
    EXITS: "StockExits",
    SUPPLIERS: "Suppliers",
}
COUNTERS_TABLE = "Counters"

SUPPLIER_FIELDS = (
    "category", "contact_person", "email", "phone", "address", "city", "country",
    "last_order_date", "payment_terms", "notes", "created_at", "updated_at",
)


def to_dynamo(obj: Any) -> Any:
    """float -> Decimal, Enum -> value; None alanlar yazılmaz."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: to_dynamo(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, list):
        return [to_dynamo(i) for i in obj]
    return obj


def from_dynamo(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return int(obj) if obj == int(obj) else float(obj)
    if isinstance(obj, dict):
        return {k: from_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [from_dynamo(i) for i in obj]
    return obj


def _is_condition_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoDBStockRepository(StockRepository):
    """DynamoDB tablolarında saklanan stok verisi."""

    def __init__(
        self,
        region_name: str = "us-east-1",
        table_prefix: str = "",
        dynamodb_resource: Optional[Any] = None,
    ):
        super().__init__()
        # dependency injection destekli
        self.dynamodb = dynamodb_resource or boto3.resource("dynamodb", region_name=region_name)
        self.tables = {
            name: self.dynamodb.Table(f"{table_prefix}{table}")
            for name, table in TABLE_NAMES.items()
        }
        self.counters_table = self.dynamodb.Table(f"{table_prefix}{COUNTERS_TABLE}")
        logger.info("DynamoDB deposu hazır (önek: %r)", table_prefix)

    # --- Yardımcılar ---

    def _next_id(self, collection: str) -> int:
        try:
            response = self.counters_table.update_item(
                Key={"name": collection},
                UpdateExpression="ADD current_value :one",
                ExpressionAttributeValues={":one": 1},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            logger.error("Id üretme hatası [%s]: %s", collection, e)
            raise
        return int(response["Attributes"]["current_value"])

    def _scan_all(self, collection: str) -> list[dict]:
        table = self.tables[collection]
        records: list[dict] = []
        kwargs: dict[str, Any] = {}
        try:
            while True:
                response = table.scan(**kwargs)
                records.extend(from_dynamo(response.get("Items", [])))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except ClientError as e:
            logger.error("Tablo tarama hatası [%s]: %s", collection, e)
            raise
        return records

    def _get(self, collection: str, record_id: int) -> Optional[dict]:
        try:
            response = self.tables[collection].get_item(Key={"id": record_id})
        except ClientError as e:
            logger.error("Kayıt okuma hatası [%s/%s]: %s", collection, record_id, e)
            raise
        item = response.get("Item")
        return from_dynamo(item) if item else None

    def _put(self, collection: str, record: dict, must_exist: bool = False) -> None:
        kwargs: dict[str, Any] = {"Item": to_dynamo(record)}
        if must_exist:
            kwargs["ConditionExpression"] = "attribute_exists(id)"
        try:
            self.tables[collection].put_item(**kwargs)
        except ClientError as e:
            if must_exist and _is_condition_failure(e):
                raise RecordNotFoundError(collection, record.get("id")) from e
            logger.error("Kayıt yazma hatası [%s]: %s", collection, e)
            raise

    def _delete(self, collection: str, record_id: int) -> None:
        try:
            self.tables[collection].delete_item(
                Key={"id": record_id},
                ConditionExpression="attribute_exists(id)",
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise RecordNotFoundError(collection, record_id) from e
            logger.error("Kayıt silme hatası [%s/%s]: %s", collection, record_id, e)
            raise

    # --- Dönüşümler ---

    @staticmethod
    def _supplier_from_record(record: dict) -> Supplier:
        return Supplier(
            id=record["id"],
            name=record["name"],
            rating=float(record.get("rating", 0.0)),
            status=SupplierStatus(record.get("status", SupplierStatus.ACTIVE.value)),
            reliability=SupplierReliability(record.get("reliability", SupplierReliability.GOOD.value)),
            **{f: record.get(f) for f in SUPPLIER_FIELDS},
        )

    @staticmethod
    def _supplier_to_record(supplier: Supplier) -> dict:
        record = {
            "id": supplier.id,
            "name": supplier.name,
            "rating": float(supplier.rating),
            "status": supplier.status,
            "reliability": supplier.reliability,
        }
        record.update({f: getattr(supplier, f) for f in SUPPLIER_FIELDS})
        return record

    @staticmethod
    def _entry_from_record(record: dict) -> StockEntry:
        return StockEntry(
            id=record["id"],
            stock_item_id=record["stock_item_id"],
            quantity=record["quantity"],
            unit_price=float(record["unit_price"]),
            date=record["date"],
            supplier_id=record.get("supplier_id"),
            status=EntryStatus(record.get("status", EntryStatus.PENDING.value)),
            batch_number=record.get("batch_number"),
            expiry_date=record.get("expiry_date"),
            notes=record.get("notes"),
            created_at=record.get("created_at"),
            updated_at=record.get("updated_at"),
        )

    @staticmethod
    def _entry_to_record(entry: StockEntry) -> dict:
        return {
            "id": entry.id,
            "stock_item_id": entry.stock_item_id,
            "quantity": entry.quantity,
            "unit_price": float(entry.unit_price),
            "total_value": float(entry.total_value),
            "date": entry.date,
            "supplier_id": entry.supplier_id,
            "status": entry.status,
            "batch_number": entry.batch_number,
            "expiry_date": entry.expiry_date,
            "notes": entry.notes,
            "created_at": entry.created_at,
            "updated_at": entry.updated_at,
        }

    @staticmethod
    def _exit_from_record(record: dict) -> StockExit:
        return StockExit(
            id=record["id"],
            stock_item_id=record["stock_item_id"],
            quantity=record["quantity"],
            unit_price=float(record["unit_price"]),
            date=record["date"],
            customer=record["customer"],
            status=ExitStatus(record.get("status", ExitStatus.PENDING.value)),
            urgency=ExitUrgency(record.get("urgency", ExitUrgency.LOW.value)),
            order_number=record.get("order_number"),
            delivery_address=record.get("delivery_address"),
            notes=record.get("notes"),
            created_at=record.get("created_at"),
            updated_at=record.get("updated_at"),
        )

    @staticmethod
    def _exit_to_record(stock_exit: StockExit) -> dict:
        return {
            "id": stock_exit.id,
            "stock_item_id": stock_exit.stock_item_id,
            "quantity": stock_exit.quantity,
            "unit_price": float(stock_exit.unit_price),
            "total_value": float(stock_exit.total_value),
            "date": stock_exit.date,
            "customer": stock_exit.customer,
            "status": stock_exit.status,
            "urgency": stock_exit.urgency,
            "order_number": stock_exit.order_number,
            "delivery_address": stock_exit.delivery_address,
            "notes": stock_exit.notes,
            "created_at": stock_exit.created_at,
            "updated_at": stock_exit.updated_at,
        }

    @staticmethod
    def _item_from_record(
        record: dict, supplier: Supplier, entries: list[StockEntry], exits: list[StockExit]
    ) -> StockItem:
        return StockItem(
            id=record["id"],
            name=record["name"],
            category=record["category"],
            description=record.get("description"),
            current_stock=compute_current_stock(record["id"], entries, exits),
            min_stock=record["min_stock"],
            max_stock=record["max_stock"],
            unit_price=float(record["unit_price"]),
            supplier=supplier,
            status=StockItemStatus(record.get("status", StockItemStatus.ACTIVE.value)),
            created_at=record.get("created_at"),
            updated_at=record.get("updated_at"),
        )

    # --- Stok kalemleri ---

    def list_stock_items(self) -> list[StockItem]:
        suppliers = {s.id: s for s in self.list_suppliers()}
        entries = [self._entry_from_record(r) for r in self._scan_all(ENTRIES)]
        exits = [self._exit_from_record(r) for r in self._scan_all(EXITS)]

        items = []
        for record in self._scan_all(ITEMS):
            supplier = suppliers.get(record.get("supplier_id"))
            if supplier is None:
                logger.warning("Tedarikçisi olmayan kalem atlandı: id=%s", record.get("id"))
                continue
            items.append(self._item_from_record(record, supplier, entries, exits))
        return items

    def get_stock_item(self, item_id: int) -> Optional[StockItem]:
        record = self._get(ITEMS, item_id)
        if record is None:
            return None
        supplier = self.get_supplier(record.get("supplier_id"))
        if supplier is None:
            return None
        entries = [self._entry_from_record(r) for r in self._scan_all(ENTRIES)]
        exits = [self._exit_from_record(r) for r in self._scan_all(EXITS)]
        return self._item_from_record(record, supplier, entries, exits)

    def insert_stock_item(
        self,
        name: str,
        category: str,
        description: Optional[str],
        min_stock: int,
        max_stock: int,
        unit_price: float,
        supplier_id: int,
    ) -> int:
        item_id = self._next_id(ITEMS)
        self._put(ITEMS, {
            "id": item_id,
            "name": name,
            "category": category,
            "description": description,
            "min_stock": min_stock,
            "max_stock": max_stock,
            "unit_price": float(unit_price),
            "supplier_id": supplier_id,
            "status": StockItemStatus.ACTIVE,
        })
        self._notify(ITEMS)
        return item_id

    def update_stock_item(self, item: StockItem) -> None:
        self._put(ITEMS, {
            "id": item.id,
            "name": item.name,
            "category": item.category,
            "description": item.description,
            "min_stock": item.min_stock,
            "max_stock": item.max_stock,
            "unit_price": float(item.unit_price),
            "supplier_id": item.supplier.id,
            "status": item.status,
            "created_at": item.created_at,
            "updated_at": item.updated_at,
        }, must_exist=True)
        self._notify(ITEMS)

    def delete_stock_item(self, item_id: int) -> None:
        self._delete(ITEMS, item_id)
        # Kaleme bağlı hareketler de silinir
        for collection in (ENTRIES, EXITS):
            for record in self._scan_all(collection):
                if record.get("stock_item_id") == item_id:
                    self._delete(collection, record["id"])
        self._notify(ITEMS, ENTRIES, EXITS)

    # --- Girişler ---

    def list_stock_entries(self) -> list[StockEntry]:
        items = {r["id"]: r for r in self._scan_all(ITEMS)}
        suppliers = {r["id"]: r for r in self._scan_all(SUPPLIERS)}
        entries = []
        for record in self._scan_all(ENTRIES):
            entry = self._entry_from_record(record)
            item = items.get(entry.stock_item_id, {})
            supplier = suppliers.get(entry.supplier_id, {})
            entries.append(replace(
                entry,
                product_name=item.get("name", ""),
                category=item.get("category", ""),
                supplier=supplier.get("name", ""),
            ))
        return entries

    def insert_stock_entry(self, entry: StockEntry) -> int:
        entry_id = self._next_id(ENTRIES)
        record = self._entry_to_record(entry)
        record["id"] = entry_id
        self._put(ENTRIES, record)
        self._notify(ENTRIES, ITEMS)
        return entry_id

    def update_stock_entry(self, entry: StockEntry) -> None:
        self._put(ENTRIES, self._entry_to_record(entry), must_exist=True)
        self._notify(ENTRIES, ITEMS)

    def delete_stock_entry(self, entry_id: int) -> None:
        self._delete(ENTRIES, entry_id)
        self._notify(ENTRIES, ITEMS)

    # --- Çıkışlar ---

    def list_stock_exits(self) -> list[StockExit]:
        items = {r["id"]: r for r in self._scan_all(ITEMS)}
        exits = []
        for record in self._scan_all(EXITS):
            stock_exit = self._exit_from_record(record)
            item = items.get(stock_exit.stock_item_id, {})
            exits.append(replace(
                stock_exit,
                product_name=item.get("name", ""),
                category=item.get("category", ""),
            ))
        return exits

    def insert_stock_exit(self, stock_exit: StockExit) -> int:
        exit_id = self._next_id(EXITS)
        record = self._exit_to_record(stock_exit)
        record["id"] = exit_id
        self._put(EXITS, record)
        self._notify(EXITS, ITEMS)
        return exit_id

    def update_stock_exit(self, stock_exit: StockExit) -> None:
        self._put(EXITS, self._exit_to_record(stock_exit), must_exist=True)
        self._notify(EXITS, ITEMS)

    def delete_stock_exit(self, exit_id: int) -> None:
        self._delete(EXITS, exit_id)
        self._notify(EXITS, ITEMS)

    # --- Tedarikçiler ---

    def list_suppliers(self) -> list[Supplier]:
        return [self._supplier_from_record(r) for r in self._scan_all(SUPPLIERS)]

    def get_supplier(self, supplier_id: Optional[int]) -> Optional[Supplier]:
        if supplier_id is None:
            return None
        record = self._get(SUPPLIERS, supplier_id)
        return self._supplier_from_record(record) if record else None

    def insert_supplier(self, supplier: Supplier) -> int:
        supplier_id = self._next_id(SUPPLIERS)
        record = self._supplier_to_record(supplier)
        record["id"] = supplier_id
        self._put(SUPPLIERS, record)
        self._notify(SUPPLIERS)
        return supplier_id

    def update_supplier(self, supplier: Supplier) -> None:
        self._put(SUPPLIERS, self._supplier_to_record(supplier), must_exist=True)
        self._notify(SUPPLIERS, ITEMS, ENTRIES)

    def delete_supplier(self, supplier_id: int) -> None:
        self._delete(SUPPLIERS, supplier_id)
        self._notify(SUPPLIERS, ITEMS, ENTRIES)
