"""Store repositories: row-level CRUD over one table.

``StoreRepository`` is the contract every adapter honours. Filters are
equality-only (``{"field": value}``); ordering is by a single field.
``JsonStoreRepository`` keeps the table as a JSON list in a local file.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ecolista.domain.errors import RemoteError
from ecolista.utilities.constants import PRODUCT_FIELDS

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class StoreRepository:
    """Async row-level CRUD contract bound to a single table."""

    table: str = ""

    async def select(self, filters: Optional[Dict[str, Any]] = None, order: Optional[str] = None,
                     descending: bool = False, columns: str = "*") -> List[Row]:
        raise NotImplementedError

    async def insert(self, row: Row) -> Row:
        raise NotImplementedError

    async def update(self, row_id: str, patch: Row) -> Row:
        """Apply ``patch`` to the row with ``row_id``; RemoteError if no row matched."""
        raise NotImplementedError

    async def delete(self, filters: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None


def _matches(row: Row, filters: Optional[Dict[str, Any]]) -> bool:
    return all(row.get(k) == v for k, v in (filters or {}).items())


def _project(row: Row, columns: str) -> Row:
    if not columns or columns.strip() == "*":
        return dict(row)
    wanted = [c.strip() for c in columns.split(",") if c.strip()]
    return {c: row.get(c) for c in wanted}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonStoreRepository(StoreRepository):
    """Table persisted as a JSON list of rows (local runs, tests)."""

    def __init__(self, path, table: str = "eco_lista"):
        self.path = Path(path)
        self.table = table

    # --- file helpers -----------------------------------------------------
    def _load(self) -> List[Row]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f) or []
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read table file {self.path}: {e}")
            raise RemoteError(f"No se pudo leer la tabla {self.table}") from e
        if not isinstance(data, list):
            raise RemoteError(f"Tabla {self.table} con formato inválido")
        return data

    def _atomic_write(self, rows: List[Row]):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.table}_", suffix=".json")
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                    json.dump(rows, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, self.path)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except OSError as e:
            logger.error(f"Failed to write table file {self.path}: {e}")
            raise RemoteError(f"No se pudo guardar la tabla {self.table}") from e

    # --- contract ---------------------------------------------------------
    async def select(self, filters=None, order=None, descending=False, columns="*"):
        rows = [r for r in self._load() if _matches(r, filters)]
        if order:
            # Stable sort; rows missing the key go last either way
            present = [r for r in rows if r.get(order) is not None]
            missing = [r for r in rows if r.get(order) is None]
            present.sort(key=lambda r: r[order], reverse=descending)
            rows = present + missing
        return [_project(r, columns) for r in rows]

    async def insert(self, row):
        rows = self._load()
        new_row = {k: v for k, v in row.items() if k in PRODUCT_FIELDS}
        new_row["id"] = uuid4().hex
        new_row.setdefault("fecha_compra", _now())
        rows.append(new_row)
        self._atomic_write(rows)
        return dict(new_row)

    async def update(self, row_id, patch):
        rows = self._load()
        for r in rows:
            if r.get("id") == row_id:
                r.update({k: v for k, v in patch.items() if k != "id"})
                self._atomic_write(rows)
                return dict(r)
        raise RemoteError(f"No existe la fila {row_id} en {self.table}")

    async def delete(self, filters):
        if not filters:
            raise RemoteError("Borrado sin filtros rechazado")
        rows = self._load()
        kept = [r for r in rows if not _matches(r, filters)]
        if len(kept) != len(rows):
            self._atomic_write(kept)
