from typing import Final

# Sentinel category meaning "all products"
ALL_PRODUCTS: Final[str] = ""

DEFAULT_LIST_NAME: Final[str] = "Lista Personalizada"
ORDER_FIELD: Final[str] = "fecha_compra"
DEFAULT_QUANTITY: Final[int] = 1
PLACEHOLDER_QUANTITY: Final[int] = 0

PRODUCT_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "nombre_producto",
    "categoria",
    "impacto_ambiental",
    "sugerencia_sostenible",
    "cantidad",
    "frecuencia",
    "fecha_compra",
    "nombre_lista",
)

# Fields overwritten by an edit (id and frecuencia are never touched)
EDITABLE_FIELDS: Final[tuple[str, ...]] = (
    "nombre_producto",
    "categoria",
    "impacto_ambiental",
    "sugerencia_sostenible",
    "cantidad",
)

# View modes of the product list
VIEW_ALL: Final[str] = "all"
VIEW_CATEGORY: Final[str] = "category"
VIEW_QUERY: Final[str] = "query"
VIEW_FREQUENT: Final[str] = "frequent"

# User-facing notices (shown by the mobile screens)
MSG_PRODUCT_ADDED: Final[str] = "Producto agregado correctamente"
MSG_QUANTITY_UPDATED: Final[str] = "Cantidad actualizada del producto existente"
MSG_PRODUCT_UPDATED: Final[str] = "Producto actualizado"
MSG_PRODUCT_DELETED: Final[str] = "Producto eliminado"
MSG_CATEGORY_ADDED: Final[str] = "Categoría agregada correctamente"
MSG_CATEGORY_REMOVED: Final[str] = "Categoría eliminada"
MSG_CATEGORY_EXISTS: Final[str] = "Esta categoría ya existe."
MSG_REQUIRED_FIELDS: Final[str] = "Todos los campos son obligatorios."
MSG_EMPTY_CATEGORY: Final[str] = "El nombre de la categoría no puede estar vacío."
MSG_LOAD_FAILED: Final[str] = "No se pudo cargar el historial. Inténtalo de nuevo."
