"""
Admin router - /admin/scholarships create, update and list endpoints.
"""
import logging

from fastapi import APIRouter, Depends

from ..dependencies import AppState, admin_user, get_state
from ..errors import FormValidationError
from ..models.schemas import Scholarship, ScholarshipCreate, ScholarshipUpdate, User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/scholarships", response_model=list[Scholarship])
async def admin_list_scholarships(
    admin: User = Depends(admin_user),
    state: AppState = Depends(get_state),
):
    return await state.scholarships.scan()


@router.post("/scholarships", response_model=Scholarship, status_code=201)
async def create_scholarship(
    scholarship: ScholarshipCreate,
    admin: User = Depends(admin_user),
    state: AppState = Depends(get_state),
):
    logger.info(f"=== CREATE SCHOLARSHIP by {admin.email} ===")
    created = await state.scholarships.insert(scholarship)
    logger.info(f"Scholarship {created.id} created: {created.name}")
    return created


@router.patch("/scholarships/{scholarship_id}", response_model=Scholarship)
async def update_scholarship(
    scholarship_id: str,
    update: ScholarshipUpdate,
    admin: User = Depends(admin_user),
    state: AppState = Depends(get_state),
):
    """Change only the supplied fields of a scholarship."""
    changes = update.changes()
    if not changes:
        raise FormValidationError("No fields to update")

    logger.info(f"=== UPDATE SCHOLARSHIP {scholarship_id} by {admin.email} ===")
    logger.debug(f"Changed fields: {sorted(changes)}")
    return await state.scholarships.update(scholarship_id, changes)
