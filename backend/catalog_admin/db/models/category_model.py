# backend/catalog_admin/db/models/category_model.py
"""
Se encarga de definir los modelos de categoría para la aplicación.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from catalog_admin.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Nombres duplicados permitidos: no hay UniqueConstraint sobre name
    name = Column(String(255), nullable=False)

    product_links = relationship("ProductCategory", back_populates="category")
