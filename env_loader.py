"""Merkezi .env yükleyici. Tüm giriş noktaları (demo, MCP server, data_layer) bunu import etsin.

Varsayılan olarak proje kökündeki .env okunur; STOCK_ENV_FILE ile başka bir
dosya seçilebilir. Ortamda zaten tanımlı değişkenler ezilmez.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent
ENV_PATH = Path(os.environ.get("STOCK_ENV_FILE", PROJECT_ROOT / ".env"))

load_dotenv(ENV_PATH, override=False)
