# models/member.py
from typing import List

from taskboard.models.api_response import ApiData, ApiModel
from taskboard.models.permissions import Permission


class MemberRead(ApiModel):
    user_id: int
    nickname: str
    permissions: Permission
    is_owner: bool = False


class MembersData(ApiData):
    members: List[MemberRead]


class PermissionsIdData(ApiData):
    permissions_id: int
