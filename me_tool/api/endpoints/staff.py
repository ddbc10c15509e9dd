from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_db, parse_form, read_form
from me_tool.api.responses import created_response, render_page, serialize
from me_tool.core.permissions import is_admin, require_admin, require_user
from me_tool.crud.staff import staff as staff_crud
from me_tool.schemas.staff import SafeStaff, StaffCreate

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("")
def list_staff(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    # SafeStaff drops the password hash before anything leaves the handler
    return render_page(
        request,
        "staff.html",
        {
            "staff": serialize(SafeStaff, staff_crud.get_multi(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("")
async def create_staff(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    obj_in = parse_form(StaffCreate, await read_form(request))
    staff = staff_crud.create(db, obj_in=obj_in)
    return created_response(request, SafeStaff.model_validate(staff), message="Staff member created")
