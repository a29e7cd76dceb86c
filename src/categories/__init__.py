from src.categories.models import Category, CategoryTranslation
from src.categories.schemas import (
    CategoryBase,
    CategoryCreate,
    CategoryLocalized,
    CategoryResponse,
    CategoryTranslationBase,
    CategoryTranslationCreate,
    CategoryTranslationResponse,
    CategoryTranslationUpsert,
    CategoryWithTranslations,
)

__all__ = [
    # Models
    "Category",
    "CategoryTranslation",
    # Schemas - Category
    "CategoryBase",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryWithTranslations",
    "CategoryLocalized",
    # Schemas - CategoryTranslation
    "CategoryTranslationBase",
    "CategoryTranslationCreate",
    "CategoryTranslationUpsert",
    "CategoryTranslationResponse",
]
