"""Translation store backed by a SQL translation table."""
from typing import Any, Dict, Mapping, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from src.locales.registry import LocaleRegistry
from src.logging_config import get_logger
from src.translations.base import TranslationStore

logger = get_logger(__name__)

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SqlTranslationStore(TranslationStore):
    """Translations stored as rows of ``model``.

    ``model`` must have a ``locale`` column, an entity foreign key column
    named ``entity_column`` and a unique constraint on both.
    """

    def __init__(
        self,
        db: AsyncSession,
        model,
        entity_column: str,
        fields: Sequence[str],
        registry: LocaleRegistry | None = None,
    ):
        super().__init__(registry)
        self.db = db
        self.model = model
        self.entity_column = entity_column
        self.fields = tuple(fields)

    @property
    def _entity_attr(self):
        return getattr(self.model, self.entity_column)

    def _insert(self):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Upsert is not supported on dialect '{dialect}'") from None

    async def get(self, entity_id: int, locale: str) -> Optional[Any]:
        result = await self.db.execute(
            select(self.model)
            .where(self._entity_attr == entity_id, self.model.locale == locale)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all(self, entity_id: int) -> Dict[str, Any]:
        result = await self.db.execute(
            select(self.model)
            .where(self._entity_attr == entity_id)
            .execution_options(populate_existing=True)
        )
        return {translation.locale: translation for translation in result.scalars().all()}

    async def put(self, entity_id: int, locale: str, fields: Mapping[str, Any]) -> Any:
        unknown = set(fields) - set(self.fields)
        if unknown:
            raise ValueError(f"Unknown translation fields: {sorted(unknown)}")
        values = {name: fields[name] for name in self.fields if name in fields}

        insert = self._insert()
        stmt = insert(self.model).values(
            **{self.entity_column: entity_id, "locale": locale},
            **values,
        )
        if values:
            stmt = stmt.on_conflict_do_update(
                index_elements=[self.entity_column, "locale"],
                set_=values,
            )
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=[self.entity_column, "locale"])

        await self.db.execute(stmt)
        await self.db.commit()
        logger.debug("Upserted %s(%s=%s, locale=%s)", self.model.__name__, self.entity_column, entity_id, locale)
        return await self.get(entity_id, locale)

    async def delete(self, entity_id: int, locale: str | None = None) -> int:
        stmt = delete(self.model).where(self._entity_attr == entity_id)
        if locale is not None:
            stmt = stmt.where(self.model.locale == locale)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount
