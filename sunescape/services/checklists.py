"""Shared groceries and to-do lists. Same ownership rule as everything else."""
from sqlalchemy.orm import Session

from sunescape.models.checklist import Grocery, Todo
from sunescape.models.profile import Profile
from sunescape.services.profiles import can_manage
from sunescape.services.result import Ok, Result, not_found_error, permission_error, validation_error

COLLECTIONS = {"groceries": Grocery, "todos": Todo}


def list_items(db: Session, model) -> list:
    return db.query(model).order_by(model.created_at.desc(), model.id.desc()).all()


def add_item(db: Session, actor: Profile, model, title: str, owner: str | None = None) -> Result:
    title = (title or "").strip()
    if not title:
        return validation_error("Title is required.")
    item = model(title=title, owner=(owner or "").strip() or None, completed=False, created_by=actor.id)
    db.add(item)
    db.commit()
    db.refresh(item)
    return Ok(item)


def _owned_item(db: Session, actor: Profile, model, item_id: int) -> Result:
    item = db.query(model).filter(model.id == item_id).first()
    if not item:
        return not_found_error("Item not found")
    if not can_manage(actor, item.created_by):
        return permission_error("You can only change items you added.")
    return Ok(item)


def toggle_item(db: Session, actor: Profile, model, item_id: int) -> Result:
    found = _owned_item(db, actor, model, item_id)
    if not found.ok:
        return found
    item = found.value
    item.completed = not item.completed
    db.commit()
    db.refresh(item)
    return Ok(item)


def remove_item(db: Session, actor: Profile, model, item_id: int) -> Result:
    found = _owned_item(db, actor, model, item_id)
    if not found.ok:
        return found
    db.delete(found.value)
    db.commit()
    return found
