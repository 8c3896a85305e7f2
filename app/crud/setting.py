# app/crud/setting.py

import uuid
from typing import List

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.db.session import utcnow
from app.models.setting import Setting

# INSERT ... ON CONFLICT есть только в диалектах Postgres и SQLite
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_setting(db: Session, business_id: uuid.UUID, key: str, value: str) -> Setting:
    """
    Создает или обновляет настройку одним запросом:
    INSERT ... ON CONFLICT (business_id, key) DO UPDATE.
    """
    dialect = db.get_bind().dialect.name
    insert = UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'")

    now = utcnow()
    stmt = insert(Setting).values(
        id=uuid.uuid4(),
        business_id=business_id,
        key=key,
        value=value,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["business_id", "key"],
        set_={"value": stmt.excluded["value"], "updated_at": now},
    ).returning(Setting)

    setting = db.scalars(stmt, execution_options={"populate_existing": True}).one()
    db.commit()
    db.refresh(setting)
    return setting


def get_setting(db: Session, business_id: uuid.UUID, key: str) -> Setting | None:
    return db.query(Setting).filter_by(business_id=business_id, key=key).first()


def get_settings_by_business(db: Session, business_id: uuid.UUID) -> List[Setting]:
    return db.query(Setting).filter(Setting.business_id == business_id).order_by(Setting.key).all()


def delete_setting(db: Session, setting: Setting):
    db.delete(setting)
    db.commit()
