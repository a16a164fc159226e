import json

import pytest

from ecolista.domain.errors import RemoteError
from ecolista.infra.Store_Repository import JsonStoreRepository

# Limpieza: p1, p2 / Granos: p3. Store order (fecha_compra desc) is p1, p3, p2.
SEED_ROWS = [
    {
        "id": "p1", "nombre_producto": "Jabón ecológico", "categoria": "Limpieza",
        "impacto_ambiental": "Bajo", "sugerencia_sostenible": "Comprar a granel",
        "cantidad": 2, "frecuencia": 1, "fecha_compra": "2024-05-03T10:00:00+00:00",
        "nombre_lista": "Lista Personalizada",
    },
    {
        "id": "p2", "nombre_producto": "Detergente", "categoria": "Limpieza",
        "impacto_ambiental": "Alto", "sugerencia_sostenible": "Detergente biodegradable",
        "cantidad": 1, "frecuencia": 0, "fecha_compra": "2024-05-01T10:00:00+00:00",
        "nombre_lista": "Lista Personalizada",
    },
    {
        "id": "p3", "nombre_producto": "Arroz integral", "categoria": "Granos",
        "impacto_ambiental": "Medio", "sugerencia_sostenible": "Bolsa reutilizable",
        "cantidad": 5, "frecuencia": 4, "fecha_compra": "2024-05-02T10:00:00+00:00",
        "nombre_lista": "Lista Personalizada",
    },
]


def write_rows(path, rows):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(rows, f, ensure_ascii=False, indent=2)


def read_rows(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class FlakyStore(JsonStoreRepository):
    """JSON store that raises RemoteError for the operations listed in ``fail_on``."""

    def __init__(self, path, fail_on=()):
        super().__init__(path)
        self.fail_on = set(fail_on)
        self.calls = []

    def _check(self, op):
        self.calls.append(op)
        if op in self.fail_on:
            raise RemoteError(f"{op} failed")

    async def select(self, filters=None, order=None, descending=False, columns="*"):
        self._check("select")
        return await super().select(filters, order, descending, columns)

    async def insert(self, row):
        self._check("insert")
        return await super().insert(row)

    async def update(self, row_id, patch):
        self._check("update")
        return await super().update(row_id, patch)

    async def delete(self, filters):
        self._check("delete")
        return await super().delete(filters)


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "eco_lista.json"
    write_rows(path, [dict(r) for r in SEED_ROWS])
    return path


@pytest.fixture
def store(table_file):
    return FlakyStore(table_file)


@pytest.fixture
def stored_rows(table_file):
    """Callable returning the rows currently persisted in the table file."""
    return lambda: read_rows(table_file)
