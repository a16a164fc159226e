"""
Input validation schemas using Pydantic for better data integrity.
"""
from typing import Any, Type, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ecolista.domain.errors import ValidationError
from ecolista.utilities.constants import DEFAULT_QUANTITY, MSG_REQUIRED_FIELDS

ModelT = TypeVar('ModelT', bound=BaseModel)


def _require_text(v):
    """Reject values that are empty once whitespace is stripped (value kept verbatim)."""
    if not isinstance(v, str) or not v.strip():
        raise ValueError('must not be empty')
    return v


class ProductInput(BaseModel):
    """Candidate product submitted from the add-product form."""
    nombre_producto: str
    categoria: str
    impacto_ambiental: str
    sugerencia_sostenible: str
    cantidad: int = Field(DEFAULT_QUANTITY, ge=0)

    @field_validator('nombre_producto', 'categoria', 'impacto_ambiental', 'sugerencia_sostenible')
    @classmethod
    def not_blank(cls, v):
        return _require_text(v)


class ProductEditInput(BaseModel):
    """Full overwrite of an existing row, keyed by id."""
    id: str = Field(..., min_length=1)
    nombre_producto: str
    categoria: str
    impacto_ambiental: str = ""
    sugerencia_sostenible: str = ""
    cantidad: int = Field(..., ge=0)

    @field_validator('nombre_producto', 'categoria')
    @classmethod
    def not_blank(cls, v):
        return _require_text(v)


class CategoryInput(BaseModel):
    """Schema for a new category name."""
    name: str

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _require_text(v).strip()


class CategorySelectInput(BaseModel):
    # "" selects every product
    categoria: str = ""


class SearchInput(BaseModel):
    text: str = ""


def parse_input(model: Type[ModelT], data: Any, message: str = MSG_REQUIRED_FIELDS) -> ModelT:
    """Validate raw data against a schema, raising the domain ValidationError on failure."""
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        fields = sorted({str(err['loc'][0]) for err in e.errors() if err.get('loc')})
        detail = f"{message} ({', '.join(fields)})" if fields else message
        raise ValidationError(detail) from e
