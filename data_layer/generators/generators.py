"""Örnek stok verisi üretim modülü.

8 tedarikçi, 6 kategori, 30 ürün ve 90 günlük giriş/çıkış hareketi üretir.
Aynı seed ile her zaman aynı veri üretilir.

Problemli senaryolar:
- Stok tükenmesi (hiç giriş almamış ürünler)
- Düşük stok (girişin neredeyse tamamı çıkmış ürünler)
- Fazla stok (maksimumun üstünde giriş)
- İptal edilen giriş ve çıkışlar
"""
import json
import os
import random
from datetime import datetime, timedelta
from typing import Dict, List

from src.models.inventory import (
    EntryStatus,
    ExitStatus,
    ExitUrgency,
    StockEntry,
    StockExit,
    Supplier,
    SupplierReliability,
    SupplierStatus,
)
from src.repository.base import StockRepository


# --- SABİTLER ---

SUPPLIERS = [
    {"name": "Nordic Components", "country": "Sweden", "city": "Malmö", "rating": 4.6},
    {"name": "Atlas Office Supply", "country": "France", "city": "Lyon", "rating": 4.1},
    {"name": "Delta Electronics", "country": "Germany", "city": "Hamburg", "rating": 3.8},
    {"name": "Greenfield Foods", "country": "Spain", "city": "Valencia", "rating": 4.3},
    {"name": "Orion Tools", "country": "Poland", "city": "Gdańsk", "rating": 3.2},
    {"name": "Sahara Textiles", "country": "Morocco", "city": "Casablanca", "rating": 2.9},
    {"name": "Pacific Paper Co", "country": None, "city": None, "rating": 4.8},
    {"name": "Helix Medical", "country": "Italy", "city": "Milan", "rating": 4.0},
]

PRODUCTS: Dict[str, List[tuple]] = {
    # kategori: [(ürün adı, birim fiyat)]
    "Electronics": [("USB-C Hub", 39.0), ("Wireless Mouse", 24.5), ("27in Monitor", 249.0),
                    ("Mechanical Keyboard", 89.0), ("Webcam HD", 59.0)],
    "Office": [("A4 Paper Box", 28.0), ("Stapler", 12.5), ("Desk Lamp", 34.0),
               ("Whiteboard Markers", 9.9), ("Filing Cabinet", 179.0)],
    "Food": [("Olive Oil 1L", 11.2), ("Coffee Beans 1kg", 21.0), ("Green Tea 100 bags", 7.5),
             ("Honey 500g", 9.0), ("Dried Apricots 1kg", 14.0)],
    "Tools": [("Cordless Drill", 129.0), ("Screwdriver Set", 32.0), ("Tape Measure", 8.5),
              ("Safety Gloves", 6.0), ("Workbench", 310.0)],
    "Textiles": [("Cotton T-Shirt", 15.0), ("Work Jacket", 64.0), ("Wool Socks 6pk", 18.0),
                 ("Apron", 12.0), ("Beanie", 10.0)],
    "Medical": [("First Aid Kit", 45.0), ("Nitrile Gloves 100pk", 16.0), ("Face Masks 50pk", 11.0),
                ("Thermometer", 19.0), ("Bandage Roll", 3.5)],
}

CUSTOMERS = ["Acme Retail", "Bistro Central", "City Hospital", "Metro Builders", "Lumen Studio", "Harbor School"]


def generate_dataset(seed: int = 42, days: int = 90, start_date: str = "2025-01-01") -> Dict[str, list]:
    """JSON'a yazılabilecek düz kayıt listeleri üretir."""
    rng = random.Random(seed)
    start = datetime.fromisoformat(start_date)

    suppliers = []
    for i, s in enumerate(SUPPLIERS, start=1):
        suppliers.append({
            "id": i,
            **s,
            "status": rng.choice([SupplierStatus.ACTIVE] * 4 + [SupplierStatus.PENDING, SupplierStatus.BLOCKED]).value,
            "reliability": rng.choice(list(SupplierReliability)).value,
        })

    items = []
    item_id = 0
    for category, products in PRODUCTS.items():
        for name, price in products:
            item_id += 1
            min_stock = rng.randint(5, 20)
            items.append({
                "id": item_id,
                "name": name,
                "category": category,
                "min_stock": min_stock,
                "max_stock": min_stock * rng.randint(4, 8),
                "unit_price": price,
                "supplier_id": rng.randint(1, len(suppliers)),
            })

    entries, exits = [], []
    for item in items:
        scenario = rng.random()
        if scenario < 0.1:
            continue  # stok tükenmesi: hiç giriş yok

        target = item["max_stock"] * (1.3 if scenario > 0.9 else rng.uniform(0.4, 0.9))
        received = 0
        while received < target:
            quantity = rng.randint(5, 40)
            day = rng.randint(0, days - 1)
            entries.append({
                "id": len(entries) + 1,
                "stock_item_id": item["id"],
                "quantity": quantity,
                "unit_price": round(item["unit_price"] * rng.uniform(0.6, 0.8), 2),
                "date": (start + timedelta(days=day, hours=rng.randint(7, 18))).isoformat(),
                "supplier_id": item["supplier_id"],
                "status": rng.choice([EntryStatus.RECEIVED] * 5 + [EntryStatus.VALIDATED, EntryStatus.CANCELLED]).value,
            })
            if entries[-1]["status"] != EntryStatus.CANCELLED.value:
                received += quantity

        # düşük stok senaryosu: girişin çoğu satılır
        shipped_target = received * (0.9 if scenario < 0.25 else rng.uniform(0.1, 0.5))
        shipped = 0
        while True:
            quantity = rng.randint(1, 15)
            if shipped + quantity > shipped_target:
                break
            day = rng.randint(0, days - 1)
            exits.append({
                "id": len(exits) + 1,
                "stock_item_id": item["id"],
                "quantity": quantity,
                "unit_price": item["unit_price"],
                "date": (start + timedelta(days=day, hours=rng.randint(7, 18))).isoformat(),
                "customer": rng.choice(CUSTOMERS),
                "status": rng.choice([ExitStatus.DELIVERED] * 4 + [ExitStatus.SHIPPED, ExitStatus.PENDING]).value,
                "urgency": rng.choice(list(ExitUrgency)).value,
            })
            shipped += quantity

    return {"suppliers": suppliers, "items": items, "entries": entries, "exits": exits}


def seed_repository(repository: StockRepository, dataset: Dict[str, list]) -> None:
    """Üretilen veriyi bir depoya yükler.

    Id'ler depo tarafından yeniden atanır; ilişkiler eşleme tablosuyla korunur.
    Girişler çıkışlardan önce yazılır, böylece stok hiçbir an negatife düşmez.
    """
    supplier_ids: Dict[int, int] = {}
    for s in dataset["suppliers"]:
        supplier_ids[s["id"]] = repository.insert_supplier(Supplier(
            id=0,
            name=s["name"],
            rating=s["rating"],
            status=SupplierStatus(s["status"]),
            reliability=SupplierReliability(s["reliability"]),
            country=s.get("country"),
            city=s.get("city"),
        ))

    item_ids: Dict[int, int] = {}
    for item in dataset["items"]:
        item_ids[item["id"]] = repository.insert_stock_item(
            name=item["name"],
            category=item["category"],
            description=None,
            min_stock=item["min_stock"],
            max_stock=item["max_stock"],
            unit_price=item["unit_price"],
            supplier_id=supplier_ids[item["supplier_id"]],
        )

    for entry in sorted(dataset["entries"], key=lambda e: e["date"]):
        repository.insert_stock_entry(StockEntry(
            stock_item_id=item_ids[entry["stock_item_id"]],
            quantity=entry["quantity"],
            unit_price=entry["unit_price"],
            date=entry["date"],
            supplier_id=supplier_ids[entry["supplier_id"]],
            status=EntryStatus(entry["status"]),
        ))

    for stock_exit in sorted(dataset["exits"], key=lambda x: x["date"]):
        repository.insert_stock_exit(StockExit(
            stock_item_id=item_ids[stock_exit["stock_item_id"]],
            quantity=stock_exit["quantity"],
            unit_price=stock_exit["unit_price"],
            date=stock_exit["date"],
            customer=stock_exit["customer"],
            status=ExitStatus(stock_exit["status"]),
            urgency=ExitUrgency(stock_exit["urgency"]),
        ))


def save_dataset(dataset: Dict[str, list], output_dir: str = "data_layer/data") -> None:
    os.makedirs(output_dir, exist_ok=True)
    for name, records in dataset.items():
        path = os.path.join(output_dir, f"{name}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
        print(f"  ✓  {path}: {len(records)} kayıt")


if __name__ == "__main__":
    print("🏭 Örnek stok verisi üretiliyor...\n")
    save_dataset(generate_dataset())
