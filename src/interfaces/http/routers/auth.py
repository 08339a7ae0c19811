from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.users import get_me
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context
from src.interfaces.http.schemas.auth import MeResponse

router = APIRouter(prefix="", tags=["auth"])


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    result = await get_me.execute(
        principal=context.principal,
        email=context.email,
        full_name=context.full_name,
        claims=context.claims,
    )
    return MeResponse(
        user_id=result.user_id,
        email=result.email,
        full_name=result.full_name,
        roles=result.roles,
        is_admin=result.is_admin,
        claims=result.claims,
    )
