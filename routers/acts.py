# routers/acts.py
from fastapi import APIRouter

from atos import group_and_order
from atos.builders import build_group_view
from schemas import GroupRequest, GroupResponse

router = APIRouter()


@router.post(
    "/api/acts/group",
    response_model=GroupResponse,
    summary="Group already-extracted acts (no AI call)",
    tags=["acts"],
)
def group_acts(body: GroupRequest):
    groups = group_and_order(body.acts)
    return GroupResponse(
        total_acts=len(body.acts),
        groups=[build_group_view(g) for g in groups],
    )
