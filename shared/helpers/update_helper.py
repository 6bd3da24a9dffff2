from typing import Iterable, List

from pydantic import BaseModel

# never writable through a partial update
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def apply_partial_update(db_obj, changes: BaseModel, exclude: Iterable[str] = ()) -> List[str]:
    """
    Copy onto ``db_obj`` only the fields the caller actually sent.

    Unset fields and explicit nulls leave the stored value untouched, so a
    PATCH never clears a required column by omission. Returns the names of
    the fields that were written.
    """
    blocked = PROTECTED_FIELDS.union(exclude)
    update_data = changes.model_dump(exclude_unset=True, exclude_none=True)

    applied = []
    for key, value in update_data.items():
        if key in blocked or not hasattr(db_obj, key):
            continue
        setattr(db_obj, key, value)
        applied.append(key)
    return applied
