from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base


class Post(Base):
    """Post model for database."""
    
    __tablename__ = "post"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    key = Column(String(100), unique=True, nullable=False, index=True)
    # References the category itself, never one of its translations
    category_id = Column(Integer, ForeignKey("category.id", ondelete="CASCADE"), nullable=False, index=True)
    source_locale = Column(String(16), nullable=True)
    
    # Relationship with Category (many-to-one)
    category = relationship("Category", back_populates="posts")
    
    # Relationship with PostTranslation (one-to-many)
    translations = relationship("PostTranslation", back_populates="post", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Post(id={self.id}, key='{self.key}', category_id={self.category_id})>"


class PostTranslation(Base):
    """PostTranslation model for post translations."""
    
    __tablename__ = "post_translation"
    __table_args__ = (
        UniqueConstraint("post_id", "locale", name="post_translation_post_id_locale_key"),
        UniqueConstraint("locale", "slug", name="post_translation_locale_slug_key"),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True)
    locale = Column(String(16), nullable=False, index=True)  # "en", "fr", etc.
    title = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    
    # Relationship with Post (many-to-one)
    post = relationship("Post", back_populates="translations")
    
    def __repr__(self):
        return f"<PostTranslation(id={self.id}, post_id={self.post_id}, locale='{self.locale}', title='{self.title}')>"
