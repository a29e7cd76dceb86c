from pydantic import BaseModel, Field, ConfigDict

SLUG_PATTERN = r"^[^/\s]+$"


# ========== CategoryTranslation Schemas ==========

class CategoryTranslationBase(BaseModel):
    """Base schema for CategoryTranslation."""
    name: str = Field(..., min_length=1, max_length=200, description="Translated category name")
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN, description="Locale-specific URL slug")


class CategoryTranslationUpsert(CategoryTranslationBase):
    """Schema for creating or replacing a CategoryTranslation."""
    pass


class CategoryTranslationCreate(CategoryTranslationBase):
    """Schema for a translation supplied together with a new Category."""
    locale: str = Field(..., min_length=2, max_length=16, description="Locale code (e.g. 'en', 'fr')")


class CategoryTranslationResponse(CategoryTranslationBase):
    """Schema for CategoryTranslation response."""
    id: int
    category_id: int
    locale: str
    
    model_config = ConfigDict(from_attributes=True)


# ========== Category Schemas ==========

class CategoryBase(BaseModel):
    """Base schema for Category."""
    key: str = Field(..., min_length=1, max_length=100, description="Unique category key (e.g. 'news')")
    source_locale: str | None = Field(None, min_length=2, max_length=16, description="Locale the category was written in")


class CategoryCreate(CategoryBase):
    """Schema for creating a Category."""
    translations: list[CategoryTranslationCreate] = []


class CategoryResponse(CategoryBase):
    """Schema for Category response."""
    id: int
    
    model_config = ConfigDict(from_attributes=True)


# ========== Category with translations ==========

class CategoryWithTranslations(CategoryResponse):
    """Schema for Category with all its translations."""
    translations: list[CategoryTranslationResponse] = []
    
    model_config = ConfigDict(from_attributes=True)


class CategoryLocalized(BaseModel):
    """Schema for Category localized in a specific locale.
    
    ``locale`` is the locale of the translation actually served; it differs
    from the requested one when a fallback was used, and is None (with empty
    localized fields) when the category has no translation at all.
    """
    id: int
    key: str
    requested_locale: str
    locale: str | None = None
    name: str | None = None
    slug: str | None = None
