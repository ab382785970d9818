from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.group import GroupCreate, GroupUpdate, GroupOut, MemberCreate, GroupMemberOut
from synsplit.services.group_services import create_group, delete_group, edit_group, add_member, remove_member, exit_group, list_group_for_user, list_group_members

router = APIRouter()

@router.post("/", response_model=GroupOut, status_code=201, description="create new group")
async def create_new_group(
    data: GroupCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await create_group(db, data.name, data.mode, user)

@router.get("/my-groups", response_model=list[GroupOut], description="get user groups")
async def my_groups(db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await list_group_for_user(db, user.uid)

@router.patch("/{group_id}", response_model=GroupOut)
async def edit(
    group_id: int,
    data: GroupUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await edit_group(db, group_id, user.uid, data)

@router.delete("/{group_id}")
async def del_group(group_id: int, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await delete_group(db, group_id, user.uid)

@router.get("/{group_id}/members", response_model=list[GroupMemberOut])
async def group_members(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await list_group_members(db, group.id)

@router.post("/{group_id}/members", response_model=GroupMemberOut, status_code=201)
async def add_group_member(
    group_id: int,
    data: MemberCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await add_member(db, group_id, data, user.uid)

@router.delete("/{group_id}/members/{uid}")
async def rem_mem(
    group_id: int,
    uid: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await remove_member(db, group_id, uid, user.uid)

@router.delete("/{group_id}/exit")
async def exit(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await exit_group(db, group.id, user.uid)
