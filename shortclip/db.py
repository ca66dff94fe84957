from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import and_, select


db = SQLAlchemy()


def _dialect_insert(dialect_name: str):
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
        return insert
    return None


def insert_ignoring_conflict(model, conflict_columns, **values) -> bool:
    """Insert a row unless the unique key in ``conflict_columns`` already exists.

    Returns True when a row was written. Runs inside the caller's transaction.
    """
    insert = _dialect_insert(db.session.get_bind().dialect.name)
    if insert is not None:
        stmt = (
            insert(model.__table__)
            .values(**values)
            .on_conflict_do_nothing(index_elements=list(conflict_columns))
        )
        return db.session.execute(stmt).rowcount > 0

    criteria = [getattr(model, column) == values[column] for column in conflict_columns]
    existing = db.session.execute(select(model.id).where(and_(*criteria))).first()
    if existing is not None:
        return False

    db.session.add(model(**values))
    db.session.flush()
    return True
