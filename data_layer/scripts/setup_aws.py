"""Stok dashboard DynamoDB tablolarını kurar ve örnek veriyle doldurur.

Kullanım:
    python -m data_layer.scripts.setup_aws                       # Üret, kur, yükle
    python -m data_layer.scripts.setup_aws --prefix dev_          # Önekli tablolar
    python -m data_layer.scripts.setup_aws --seed 7 --region eu-west-1
    python -m data_layer.scripts.setup_aws --tables-only          # Yalnızca tablolar
    python -m data_layer.scripts.setup_aws --delete --prefix dev_ # Tabloları sil
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from data_layer.generators.generators import generate_dataset, save_dataset
from data_layer.infrastructure.dynamodb_setup import (
    REGION,
    TABLE_PREFIX,
    create_tables,
    delete_tables,
    load_all_data,
)

DATA_DIR = "data_layer/data"

# seçenek -> (anahtar, değer alır mı)
OPTIONS = {
    "--region": ("region", True),
    "--prefix": ("prefix", True),
    "--seed": ("seed", True),
    "--delete": ("delete", False),
    "--tables-only": ("tables_only", False),
}


def parse_args(argv):
    """Komut satırı seçeneklerini sözlüğe çevirir; bilinmeyen seçenekte ValueError."""
    options = {
        "region": REGION,
        "prefix": TABLE_PREFIX,
        "seed": 42,
        "delete": False,
        "tables_only": False,
    }
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg not in OPTIONS:
            raise ValueError(f"Bilinmeyen seçenek: {arg}")
        key, takes_value = OPTIONS[arg]
        if not takes_value:
            options[key] = True
            continue
        if not args:
            raise ValueError(f"{arg} bir değer bekliyor")
        options[key] = args.pop(0)
    options["seed"] = int(options["seed"])
    return options


def main(argv=None):
    options = parse_args(sys.argv[1:] if argv is None else argv)
    region, prefix = options["region"], options["prefix"]

    if options["delete"]:
        print(f"🗑️  Tablolar siliniyor (önek: {prefix or '-'})...\n")
        delete_tables(region, prefix)
        return

    print(f"📦 Stok Dashboard kurulumu | region={region} önek={prefix or '-'}")

    if not options["tables_only"]:
        print(f"\n🏭 Örnek veri üretiliyor (seed={options['seed']})")
        save_dataset(generate_dataset(seed=options["seed"]), DATA_DIR)

    print("\n📊 Tablolar")
    create_tables(region, prefix)

    if not options["tables_only"]:
        load_all_data(DATA_DIR, region, prefix)

    print("\n✅ Hazır. Dashboard'u DynamoDB ile açmak için:")
    print(f"   STOCK_REPOSITORY_BACKEND=dynamodb STOCK_TABLE_PREFIX={prefix} python demo.py")


if __name__ == "__main__":
    main()
