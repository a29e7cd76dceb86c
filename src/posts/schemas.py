from pydantic import BaseModel, Field, ConfigDict

from src.categories.schemas import SLUG_PATTERN, CategoryLocalized


# ========== PostTranslation Schemas ==========

class PostTranslationBase(BaseModel):
    """Base schema for PostTranslation."""
    title: str = Field(..., min_length=1, max_length=200, description="Translated post title")
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN, description="Locale-specific URL slug")
    content: str = Field("", description="Translated post body")


class PostTranslationUpsert(PostTranslationBase):
    """Schema for creating or replacing a PostTranslation."""
    pass


class PostTranslationCreate(PostTranslationBase):
    """Schema for a translation supplied together with a new Post."""
    locale: str = Field(..., min_length=2, max_length=16, description="Locale code (e.g. 'en', 'fr')")


class PostTranslationResponse(PostTranslationBase):
    """Schema for PostTranslation response."""
    id: int
    post_id: int
    locale: str
    
    model_config = ConfigDict(from_attributes=True)


# ========== Post Schemas ==========

class PostBase(BaseModel):
    """Base schema for Post."""
    key: str = Field(..., min_length=1, max_length=100, description="Unique post key (e.g. 'launch')")
    category_id: int = Field(..., gt=0, description="Category ID this post belongs to")
    source_locale: str | None = Field(None, min_length=2, max_length=16, description="Locale the post was written in")


class PostCreate(PostBase):
    """Schema for creating a Post."""
    translations: list[PostTranslationCreate] = []


class PostResponse(PostBase):
    """Schema for Post response."""
    id: int
    
    model_config = ConfigDict(from_attributes=True)


# ========== Post with translations ==========

class PostWithTranslations(PostResponse):
    """Schema for Post with all its translations."""
    translations: list[PostTranslationResponse] = []
    
    model_config = ConfigDict(from_attributes=True)


class PostLocalized(BaseModel):
    """Schema for Post localized in a specific locale."""
    id: int
    key: str
    category_id: int
    requested_locale: str
    locale: str | None = None  # locale actually served, None when untranslated
    title: str | None = None
    slug: str | None = None
    content: str | None = None


class PostPage(PostLocalized):
    """Schema for a Post rendered on its localized page."""
    category: CategoryLocalized | None = None
