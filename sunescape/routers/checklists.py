"""Groceries and to-dos share one set of routes, keyed by collection name."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.checklist import ChecklistItemCreate, ChecklistItemResponse
from sunescape.services import checklists as svc
from sunescape.dependencies import get_current_user, unwrap

router = APIRouter(prefix="/lists", tags=["checklists"])


def _model(collection: str):
    model = svc.COLLECTIONS.get(collection)
    if model is None:
        raise HTTPException(status_code=404, detail="Unknown list")
    return model


@router.get("/{collection}", response_model=list[ChecklistItemResponse])
def list_items(
    collection: str,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return [ChecklistItemResponse.model_validate(i) for i in svc.list_items(db, _model(collection))]


@router.post("/{collection}", response_model=ChecklistItemResponse)
def add_item(
    collection: str,
    data: ChecklistItemCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    item = unwrap(svc.add_item(db, current_user, _model(collection), data.title, data.owner))
    return ChecklistItemResponse.model_validate(item)


@router.post("/{collection}/{item_id}/toggle", response_model=ChecklistItemResponse)
def toggle_item(
    collection: str,
    item_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    item = unwrap(svc.toggle_item(db, current_user, _model(collection), item_id))
    return ChecklistItemResponse.model_validate(item)


@router.delete("/{collection}/{item_id}")
def remove_item(
    collection: str,
    item_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    unwrap(svc.remove_item(db, current_user, _model(collection), item_id))
    return {"ok": True}
