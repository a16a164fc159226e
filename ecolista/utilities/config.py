"""Configuration management for the EcoLista application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Remote store (Supabase / PostgREST)
SUPABASE_URL: Final[str] = os.getenv('SUPABASE_URL', '').rstrip('/')
SUPABASE_KEY: Final[str] = os.getenv('SUPABASE_KEY', '')
PRODUCTS_TABLE: Final[str] = os.getenv('PRODUCTS_TABLE', 'eco_lista')
STORE_TIMEOUT_SECONDS: Final[float] = float(os.getenv('STORE_TIMEOUT_SECONDS', '10'))

# "rest" talks to Supabase, "json" keeps the table in a local file
STORE_BACKEND: Final[str] = os.getenv('STORE_BACKEND', 'rest' if SUPABASE_URL else 'json').lower()

# Search
SEARCH_DEBOUNCE_MS: Final[int] = int(os.getenv('SEARCH_DEBOUNCE_MS', '300'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT: Final[str] = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data'))).resolve()
DATA_FILE: Final[Path] = Path(os.getenv('DATA_FILE', str(DATA_DIR / f'{PRODUCTS_TABLE}.json'))).resolve()
