"""DynamoDB tablo oluşturma ve veri yükleme.

5 tablo: StockItems, StockEntries, StockExits, Suppliers, Counters
"""
import json
import os
import sys

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))
import env_loader

from data_layer.generators.generators import seed_repository
from src.repository.dynamodb import COUNTERS_TABLE, TABLE_NAMES, DynamoDBStockRepository

REGION = os.environ.get("AWS_DEFAULT_REGION", "us-east-1")
TABLE_PREFIX = os.environ.get("STOCK_TABLE_PREFIX", "")
BOTO_CONFIG = Config(retries={"max_attempts": 3})


def _id_table(name: str) -> dict:
    return {
        "TableName": name,
        "KeySchema": [
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": "id", "AttributeType": "N"},
        ],
        "BillingMode": "PAY_PER_REQUEST",
    }


def table_definitions(prefix: str = TABLE_PREFIX) -> list:
    definitions = [_id_table(f"{prefix}{name}") for name in TABLE_NAMES.values()]
    definitions.append({
        "TableName": f"{prefix}{COUNTERS_TABLE}",
        "KeySchema": [
            {"AttributeName": "name", "KeyType": "HASH"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": "name", "AttributeType": "S"},
        ],
        "BillingMode": "PAY_PER_REQUEST",
    })
    return definitions


def create_tables(region: str = REGION, prefix: str = TABLE_PREFIX, client=None):
    """Tüm DynamoDB tablolarını oluşturur."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)

    for table_def in table_definitions(prefix):
        table_name = table_def["TableName"]
        try:
            dynamodb.describe_table(TableName=table_name)
            print(f"  ⏭️  {table_name} zaten mevcut, atlanıyor")
        except ClientError as e:
            if e.response["Error"]["Code"] == "ResourceNotFoundException":
                print(f"  🔨 {table_name} oluşturuluyor...")
                dynamodb.create_table(**table_def)
                # Tablonun aktif olmasını bekle
                waiter = dynamodb.get_waiter("table_exists")
                waiter.wait(TableName=table_name)
                print(f"  ✓  {table_name} oluşturuldu")
            else:
                raise


def _table_has_data(table_name: str, region: str = REGION, client=None) -> bool:
    """Tabloda veri var mı kontrol eder (hızlı scan, 1 item)."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)
    resp = dynamodb.scan(TableName=table_name, Limit=1, Select="COUNT")
    return resp.get("Count", 0) > 0


def load_all_data(data_dir: str = "data_layer/data", region: str = REGION, prefix: str = TABLE_PREFIX):
    """JSON verilerini depo üzerinden DynamoDB'ye yükler (zaten yüklüyse atlar)."""
    print("\n📤 DynamoDB'ye veri yükleniyor...\n")

    if _table_has_data(f"{prefix}{TABLE_NAMES['suppliers']}", region):
        print("  ⏭️  Tablolar zaten dolu, atlanıyor")
        return

    dataset = {}
    for name in ("suppliers", "items", "entries", "exits"):
        with open(f"{data_dir}/{name}.json", "r", encoding="utf-8") as f:
            dataset[name] = json.load(f)

    repository = DynamoDBStockRepository(region_name=region, table_prefix=prefix)
    seed_repository(repository, dataset)
    counts = ", ".join(f"{name}={len(records)}" for name, records in dataset.items())
    print(f"\n✅ Tüm veriler DynamoDB'ye yüklendi! ({counts})")


def delete_tables(region: str = REGION, prefix: str = TABLE_PREFIX, client=None):
    """Tüm tabloları siler (dikkatli kullan)."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)
    for table_def in table_definitions(prefix):
        table_name = table_def["TableName"]
        try:
            dynamodb.delete_table(TableName=table_name)
            print(f"  🗑️  {table_name} silindi")
        except ClientError:
            print(f"  ⏭️  {table_name} bulunamadı, atlanıyor")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "--delete":
        print("🗑️  Tablolar siliniyor...")
        delete_tables()
    else:
        print("🏗️  DynamoDB tabloları oluşturuluyor...\n")
        create_tables()
        load_all_data()
