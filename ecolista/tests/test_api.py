import json
import tempfile
import time
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from ecolista.api.api_run import create_app
from ecolista.infra.Store_Repository import JsonStoreRepository

SEED = [
    {"id": "p1", "nombre_producto": "Jabón ecológico", "categoria": "Limpieza", "impacto_ambiental": "Bajo",
     "sugerencia_sostenible": "Granel", "cantidad": 2, "frecuencia": 1, "fecha_compra": "2024-05-03"},
    {"id": "p2", "nombre_producto": "Detergente", "categoria": "Limpieza", "impacto_ambiental": "Alto",
     "sugerencia_sostenible": "Biodegradable", "cantidad": 1, "frecuencia": 0, "fecha_compra": "2024-05-01"},
    {"id": "p3", "nombre_producto": "Arroz integral", "categoria": "Granos", "impacto_ambiental": "Medio",
     "sugerencia_sostenible": "Bolsa reutilizable", "cantidad": 5, "frecuencia": 4, "fecha_compra": "2024-05-02"},
]

NEW_PRODUCT = {
    "nombre_producto": "Leche de avena",
    "categoria": "Lácteos",
    "impacto_ambiental": "Bajo",
    "sugerencia_sostenible": "Envase retornable",
    "cantidad": 2,
}


class TestProductsAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        table = Path(self._tmp.name) / "eco_lista.json"
        with open(table, "w", encoding="utf-8") as f:
            json.dump(SEED, f, ensure_ascii=False)
        app = create_app(store=JsonStoreRepository(table), debounce_ms=10)
        self._ctx = TestClient(app)
        self.client = self._ctx.__enter__()

    def tearDown(self):
        self._ctx.__exit__(None, None, None)
        self._tmp.cleanup()

    def _view(self):
        resp = self.client.get("/api/products")
        self.assertEqual(resp.status_code, 200)
        return resp.json()

    def test_initial_view(self):
        data = self._view()
        self.assertEqual(data["mode"], "all")
        self.assertEqual(data["count"], 3)
        self.assertEqual([i["id"] for i in data["items"]], ["p1", "p3", "p2"])

    def test_upsert_insert_then_merge(self):
        resp = self.client.post("/api/products", json=NEW_PRODUCT)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "inserted")

        resp = self.client.post("/api/products", json={**NEW_PRODUCT, "cantidad": 3})
        self.assertEqual(resp.json()["status"], "updated")
        self.assertEqual(resp.json()["product"]["cantidad"], 5)
        self.assertEqual(self._view()["count"], 4)

    def test_blank_field_is_400(self):
        resp = self.client.post("/api/products", json={**NEW_PRODUCT, "impacto_ambiental": " "})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Todos los campos son obligatorios.", resp.json()["error"])

    def test_categories_add_duplicate_and_remove(self):
        self.assertEqual(self.client.get("/api/categories").json()["categories"], ["Limpieza", "Granos"])

        resp = self.client.post("/api/categories", json={"name": "Granos"})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["error"], "Esta categoría ya existe.")

        resp = self.client.post("/api/categories", json={"name": "Lácteos"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("Lácteos", resp.json()["categories"])

        resp = self.client.delete("/api/categories/Limpieza")
        self.assertEqual(resp.status_code, 200)
        self.assertNotIn("Limpieza", resp.json()["categories"])
        remaining = {i["categoria"] for i in self._view()["items"]}
        self.assertNotIn("Limpieza", remaining)

        resp = self.client.delete("/api/categories/%20%20")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self._view()["count"], 2)

    def test_category_and_frequent_views(self):
        data = self.client.post("/api/view/category", json={"categoria": "Granos"}).json()
        self.assertEqual(data["mode"], "category")
        self.assertEqual([i["id"] for i in data["items"]], ["p3"])
        self.assertTrue(data["history_visible"])

        data = self.client.post("/api/view/frequent").json()
        self.assertEqual(data["mode"], "frequent")
        self.assertEqual(data["items"][0]["cantidad_total"], 5)

    def test_search_settles(self):
        for text in ("j", "ja", "jab"):
            resp = self.client.post("/api/view/search", json={"text": text})
            self.assertEqual(resp.status_code, 200)
        time.sleep(0.2)
        data = self._view()
        self.assertEqual(data["mode"], "query")
        self.assertEqual([i["id"] for i in data["items"]], ["p1"])

    def test_edit_and_delete(self):
        resp = self.client.put("/api/products/p3", json={
            "nombre_producto": "Arroz yamaní", "categoria": "Granos",
            "impacto_ambiental": "Medio", "sugerencia_sostenible": "Granel", "cantidad": 7,
        })
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["product"]["frecuencia"], 4)

        resp = self.client.put("/api/products/nope", json={"nombre_producto": "X", "categoria": "Y", "cantidad": 1})
        self.assertEqual(resp.status_code, 502)

        resp = self.client.delete("/api/products/p1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([i["id"] for i in self._view()["items"]], ["p3", "p2"])

        events = self.client.get("/api/notices").json()["events"]
        self.assertIn("Producto eliminado", [e["message"] for e in events])

    def test_notices_cursor(self):
        first = self.client.get("/api/notices").json()
        self.client.post("/api/view/history")
        self.client.delete("/api/products/p2")
        newer = self.client.get("/api/notices", params={"since": first["next_cursor"]}).json()
        self.assertTrue(newer["events"])
        self.assertTrue(all(e["id"] > first["next_cursor"] for e in newer["events"]))
