"""
(대상, 사용자) 존재 여부만이 상태인 연결 행을 토글하는 공용 루틴.

좋아요, 즐겨찾기, 리스트 담기 모두 이 함수 하나로 처리한다.
연결 행 변경과 카운터 증감은 같은 트랜잭션 안에서 커밋된다.
"""
from dataclasses import dataclass
from typing import Literal

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from core.database import transaction
from domains.interaction.exceptions import ToggleConflictException

ToggleAction = Literal["added", "removed"]


@dataclass(frozen=True)
class ToggleTarget:
    link_model: type
    # 증감할 비정규화 카운터 컬럼 (없으면 연결 행만 토글)
    counter: InstrumentedAttribute | None = None
    # 카운터 소유 행을 찾을 때 쓰는 키 이름 (keys 중 하나)
    counter_key: str | None = None
    detail: str = "토글 처리 실패"


async def toggle_link(session: AsyncSession, target: ToggleTarget, **keys) -> ToggleAction:
    model = target.link_model
    conditions = [getattr(model, name) == value for name, value in keys.items()]

    async with transaction(session, target.detail, conflict=ToggleConflictException()):
        stmt = select(*[getattr(model, name) for name in keys]).where(*conditions).with_for_update()
        existing = (await session.execute(stmt)).first()

        if existing is not None:
            await session.execute(delete(model).where(*conditions))
            action: ToggleAction = "removed"
        else:
            session.add(model(**keys))
            await session.flush()
            action = "added"

        if target.counter is not None:
            await _adjust_counter(session, target, keys[target.counter_key], action)

    return action


async def _adjust_counter(session: AsyncSession, target: ToggleTarget, owner_id, action: ToggleAction) -> None:
    counter = target.counter
    owner = counter.class_

    stmt = update(owner).where(owner.id == owner_id)
    if action == "added":
        stmt = stmt.values({counter.key: counter + 1})
    else:
        # 0 밑으로 내려가지 않음
        stmt = stmt.where(counter > 0).values({counter.key: counter - 1})

    await session.execute(stmt.execution_options(synchronize_session=False))
