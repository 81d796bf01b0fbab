from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_pagination_range
from app.db.session import get_db
from app.schemas.items import ItemCreate, ItemRead
from app.services.item_service import ItemService
from app.utils.exceptions import NotFoundError
from app.utils.pagination import PaginationRange

router = APIRouter(prefix="/items", tags=["items"])


def get_service(db: Session = Depends(get_db)) -> ItemService:
    return ItemService(db)


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, svc: ItemService = Depends(get_service)) -> ItemRead:
    item = svc.create_item(name=payload.name, description=payload.description)
    return ItemRead.model_validate(item)


@router.get("", response_model=list[ItemRead])
def list_items(
    response: Response,
    page: PaginationRange = Depends(get_pagination_range),
    svc: ItemService = Depends(get_service),
) -> list[ItemRead]:
    result = svc.list_page(page)
    response.headers["Content-Range"] = result.content_range
    return [ItemRead.model_validate(x) for x in result.items]


@router.get("/{item_id}", response_model=ItemRead)
def get_item(item_id: int, svc: ItemService = Depends(get_service)) -> ItemRead:
    try:
        item = svc.get_item(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ItemRead.model_validate(item)
