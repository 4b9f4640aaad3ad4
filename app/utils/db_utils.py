from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.time_utils import get_local_time

def row_to_dict(obj, exclude=()) -> dict:
    """Column values of a mapped instance, keyed by column name."""
    return {c.key: getattr(obj, c.key) for c in obj.__table__.columns if c.key not in exclude}

def upsert_statement(db: AsyncSession, model, values: dict, key: str):
    """
    INSERT ... ON CONFLICT (key) DO UPDATE for the session's dialect.
    Every submitted column except the key is overwritten on conflict.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        insert = postgresql.insert
    elif dialect == "sqlite":
        insert = sqlite.insert
    else:
        raise NotImplementedError(f"Upsert not supported for dialect {dialect}")

    stmt = insert(model.__table__).values(**values)
    changes = {col: stmt.excluded[col] for col in values if col != key}
    changes["updated_at"] = get_local_time()
    return stmt.on_conflict_do_update(index_elements=[key], set_=changes)
