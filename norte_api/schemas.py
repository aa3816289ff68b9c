# norte_api/schemas.py
"""Request and response bodies.

JSON keys are the Spanish names the client bundle uses; fields can also be
populated by their Python names. Numeric inputs are typed loosely on purpose
because the admin form posts raw strings; `services` coerces them.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime


class AutoIn(BaseModel):
    name: str = Field(..., alias="nombre", min_length=1, max_length=255)
    price: Any = Field(None, alias="precio")
    currency: Optional[str] = Field(None, alias="moneda", max_length=10)
    images: Optional[List[str]] = Field(None, alias="imagenes")
    engine: Optional[str] = Field(None, alias="motor")
    transmission: Optional[str] = Field(None, alias="transmision")
    year: Any = Field(None, alias="anio")
    fuel: Optional[str] = Field(None, alias="combustible")
    mileage: Any = Field(None, alias="kilometraje")
    description: Optional[str] = Field(None, alias="descripcion")
    color: Optional[str] = None
    reserved: Optional[bool] = Field(None, alias="reservado")
    tag: Optional[str] = Field(None, alias="etiqueta")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class AutoOut(BaseModel):
    id: int
    name: str = Field(alias="nombre")
    price: int = Field(0, alias="precio")
    currency: Optional[str] = Field(None, alias="moneda")
    images: Optional[List[str]] = Field(None, alias="imagenes")
    engine: Optional[str] = Field(None, alias="motor")
    transmission: Optional[str] = Field(None, alias="transmision")
    year: Optional[int] = Field(None, alias="anio")
    fuel: Optional[str] = Field(None, alias="combustible")
    mileage: Optional[int] = Field(None, alias="kilometraje")
    description: Optional[str] = Field(None, alias="descripcion")
    color: Optional[str] = None
    reserved: bool = Field(False, alias="reservado")
    tag: Optional[str] = Field(None, alias="etiqueta")
    visits: int = Field(0, alias="visitas")
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class VisitOut(BaseModel):
    id: int
    visits: int = Field(alias="visitas")

    class Config:
        populate_by_name = True


class BannerIn(BaseModel):
    image: str = Field(..., alias="imagen", min_length=1)
    title: Optional[str] = Field(None, alias="titulo", max_length=255)
    link: Optional[str] = Field(None, alias="enlace")
    position: Any = Field(None, alias="orden")
    active: Optional[bool] = Field(None, alias="activo")

    class Config:
        populate_by_name = True


class BannerOut(BaseModel):
    id: int
    image: str = Field(alias="imagen")
    title: Optional[str] = Field(None, alias="titulo")
    link: Optional[str] = Field(None, alias="enlace")
    position: int = Field(0, alias="orden")
    active: bool = Field(True, alias="activo")
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class PriceGuideIn(BaseModel):
    brand: str = Field(..., alias="marca", min_length=1, max_length=100)
    model: str = Field(..., alias="modelo", min_length=1, max_length=255)
    version: Optional[str] = Field(None, max_length=255)
    year: Any = Field(None, alias="anio")
    price: Any = Field(None, alias="precio")
    currency: Optional[str] = Field(None, alias="moneda", max_length=10)

    class Config:
        populate_by_name = True


class PriceGuideOut(BaseModel):
    id: int
    brand: str = Field(alias="marca")
    model: str = Field(alias="modelo")
    version: Optional[str] = None
    year: Optional[int] = Field(None, alias="anio")
    price: int = Field(0, alias="precio")
    currency: Optional[str] = Field(None, alias="moneda")

    class Config:
        from_attributes = True
        populate_by_name = True


class PriceGuideBulkIn(BaseModel):
    entries: List[PriceGuideIn]

