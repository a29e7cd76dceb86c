from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base


class Category(Base):
    """Category model for database."""
    
    __tablename__ = "category"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    key = Column(String(100), unique=True, nullable=False, index=True)
    source_locale = Column(String(16), nullable=True)  # locale the category was first written in
    
    # Relationship with Posts (one-to-many), keyed by the locale-independent id
    posts = relationship("Post", back_populates="category", cascade="all, delete-orphan")
    
    # Relationship with CategoryTranslation (one-to-many)
    translations = relationship("CategoryTranslation", back_populates="category", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Category(id={self.id}, key='{self.key}')>"


class CategoryTranslation(Base):
    """CategoryTranslation model for category translations."""
    
    __tablename__ = "category_translation"
    __table_args__ = (
        UniqueConstraint("category_id", "locale", name="category_translation_category_id_locale_key"),
        UniqueConstraint("locale", "slug", name="category_translation_locale_slug_key"),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.id", ondelete="CASCADE"), nullable=False, index=True)
    locale = Column(String(16), nullable=False, index=True)  # "en", "fr", etc.
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False, index=True)
    
    # Relationship with Category (many-to-one)
    category = relationship("Category", back_populates="translations")
    
    def __repr__(self):
        return f"<CategoryTranslation(id={self.id}, category_id={self.category_id}, locale='{self.locale}', name='{self.name}')>"
