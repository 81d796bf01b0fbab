from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.db.models.item import Item


class ItemRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, item: Item) -> Item:
        self._db.add(item)
        self._db.flush()
        return item

    def get(self, item_id: int) -> Item | None:
        return self._db.get(Item, item_id)

    def list(self, *, limit: int, offset: int) -> list[Item]:
        stmt: Select = select(Item).order_by(Item.id.asc()).limit(limit).offset(offset)
        return list(self._db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self._db.execute(select(func.count()).select_from(Item)).scalar_one()
