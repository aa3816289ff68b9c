# norte_api/models.py
"""SQLAlchemy ORM models for persisted entities.

Column names follow the Spanish vocabulary the client bundle already speaks
(`nombre`, `precio`, ...); attributes are English.
"""
from sqlalchemy import Column, Integer, BigInteger, Text, String, Boolean, TIMESTAMP, JSON, func, Index, true, false
from sqlalchemy.dialects.postgresql import ARRAY
from .db import Base

# text[] on Postgres, JSON list elsewhere (local sqlite runs)
ImageList = JSON().with_variant(ARRAY(Text), "postgresql")


class Auto(Base):
    __tablename__ = "autos"
    id = Column(Integer, primary_key=True, index=True)
    name = Column("nombre", String(255), nullable=False)
    price = Column("precio", BigInteger, nullable=False, default=0, server_default="0")
    currency = Column("moneda", String(10), default="U$S", server_default="U$S")
    images = Column("imagenes", ImageList)
    engine = Column("motor", String(100))
    transmission = Column("transmision", String(50))
    year = Column("anio", Integer)
    fuel = Column("combustible", String(50))
    mileage = Column("kilometraje", Integer)
    description = Column("descripcion", Text)
    color = Column(String(50))
    reserved = Column("reservado", Boolean, nullable=False, default=False, server_default=false())
    tag = Column("etiqueta", String(50))
    visits = Column("visitas", Integer, nullable=False, default=0, server_default="0")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())


class Banner(Base):
    __tablename__ = "banners"
    id = Column(Integer, primary_key=True, index=True)
    image = Column("imagen", Text, nullable=False)
    title = Column("titulo", String(255))
    link = Column("enlace", Text)
    position = Column("orden", Integer, nullable=False, default=0, server_default="0")
    active = Column("activo", Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())


class PriceGuideEntry(Base):
    __tablename__ = "guia_precios"
    id = Column(Integer, primary_key=True, index=True)
    brand = Column("marca", String(100), nullable=False)
    model = Column("modelo", String(255), nullable=False)
    version = Column(String(255))
    year = Column("anio", Integer)
    price = Column("precio", BigInteger, nullable=False, default=0, server_default="0")
    currency = Column("moneda", String(10), default="U$S", server_default="U$S")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

Index("idx_guia_precios_marca_modelo", PriceGuideEntry.brand, PriceGuideEntry.model)
