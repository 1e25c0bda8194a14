import uuid
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    READER = "Lector"
    AUTHOR = "Autor"
    ADMIN = "Admin"


@dataclass(frozen=True)
class Identity:
    """토큰에서 꺼낸 호출자 정보. DB 조회 없이 만들어진다."""

    user_id: uuid.UUID
    role: Role

    @property
    def viewer_key(self) -> str:
        return f"U:{self.user_id}"


# --- 권한 판별 ---
def is_admin(identity: Identity) -> bool:
    return identity.role is Role.ADMIN


def can_moderate_comment(identity: Identity, comment_owner_id: uuid.UUID) -> bool:
    return is_admin(identity) or identity.user_id == comment_owner_id


def can_manage_recipe(identity: Identity, is_principal_author: bool) -> bool:
    """삭제/복구: 관리자 또는 대표 작성자"""
    return is_admin(identity) or is_principal_author
