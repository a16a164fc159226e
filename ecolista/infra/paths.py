from ecolista.utilities.config import DATA_DIR, DATA_FILE

# Centralized paths for data files (single source of truth)
PRODUCTS_FILE = DATA_FILE

__all__ = ['DATA_DIR', 'PRODUCTS_FILE']
