import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.db.models.item import Item
from app.repositories.item_repo import ItemRepository
from app.utils.exceptions import NotFoundError
from app.utils.pagination import PaginationRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemPage:
    items: list[Item]
    total: int
    content_range: str


class ItemService:
    def __init__(self, db: Session) -> None:
        self._db = db
        self._repo = ItemRepository(db)

    def create_item(self, *, name: str, description: str | None) -> Item:
        item = self._repo.create(Item(name=name, description=description))
        self._db.commit()
        self._db.refresh(item)
        return item

    def get_item(self, item_id: int) -> Item:
        item = self._repo.get(item_id)
        if item is None:
            raise NotFoundError(f"Элемент item_id={item_id} не найден.")
        return item

    def list_page(self, page: PaginationRange) -> ItemPage:
        items = self._repo.list(limit=page.limit, offset=page.offset)
        total = self._repo.count()
        content_range = page.as_content_range(total)
        logger.debug(f"Отдана страница {content_range}. returned={len(items)}")
        return ItemPage(items=items, total=total, content_range=content_range)
