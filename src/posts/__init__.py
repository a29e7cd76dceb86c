from src.posts.models import Post, PostTranslation
from src.posts.schemas import (
    PostBase,
    PostCreate,
    PostLocalized,
    PostPage,
    PostResponse,
    PostTranslationBase,
    PostTranslationCreate,
    PostTranslationResponse,
    PostTranslationUpsert,
    PostWithTranslations,
)

__all__ = [
    # Models
    "Post",
    "PostTranslation",
    # Schemas - Post
    "PostBase",
    "PostCreate",
    "PostResponse",
    "PostWithTranslations",
    "PostLocalized",
    "PostPage",
    # Schemas - PostTranslation
    "PostTranslationBase",
    "PostTranslationCreate",
    "PostTranslationUpsert",
    "PostTranslationResponse",
]
