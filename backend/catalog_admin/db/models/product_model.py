# backend/catalog_admin/db/models/product_model.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Numeric
from sqlalchemy.orm import relationship

from catalog_admin.db.database import Base

class Product(Base):
    """
    Modelo principal de productos del catálogo.
    Un producto puede pertenecer a varias categorías a través de product_categories.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)  # Precisión decimal para precios
    stock_quantity = Column(Integer, nullable=False, default=0)
    image_url = Column(String(255), nullable=True)

    # Sin cascade: el servicio borra las filas de unión explícitamente antes del padre
    categories = relationship("ProductCategory", back_populates="product")


class ProductCategory(Base):
    """Tabla de unión producto-categoría. La clave compuesta impide aristas duplicadas."""
    __tablename__ = "product_categories"

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id"), primary_key=True, index=True)

    product = relationship("Product", back_populates="categories")
    category = relationship("Category", back_populates="product_links")
