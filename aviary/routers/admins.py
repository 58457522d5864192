"""Admin accounts router: login/logout plus admin-only account management."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.response import DataResponse
from aviary.db.base import get_db
from aviary.dependencies import SESSION_KEY, get_authenticator, get_current_admin
from aviary.schemas.admin import (
    AdminOut,
    AdminRegister,
    AdminSession,
    AdminUpdate,
    LoginRequest,
)
from aviary.services.admin import AdminService
from aviary.services.auth import Authenticator

router = APIRouter(prefix="/api/admins", tags=["Admins"])


def _svc(session: AsyncSession) -> AdminService:
    return AdminService(session)


# ------------------------------------------------------------------
# Session
# ------------------------------------------------------------------

@router.post("/login", response_model=DataResponse[AdminSession])
async def login(
    body: LoginRequest,
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Check credentials and start an admin session (signed cookie)."""
    current = await authenticator.authenticate(body)
    request.session[SESSION_KEY] = current.model_dump()
    return {"data": current}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: Request):
    request.session.pop(SESSION_KEY, None)


@router.get("/me", response_model=DataResponse[AdminSession])
async def whoami(admin: AdminSession = Depends(get_current_admin)):
    return {"data": admin}


# ------------------------------------------------------------------
# Account management
# ------------------------------------------------------------------

@router.get("", response_model=DataResponse[list[AdminOut]])
async def list_admins(
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    admins = await _svc(session).list_admins()
    return {"data": [AdminOut.model_validate(a) for a in admins]}


@router.post("", response_model=DataResponse[AdminOut], status_code=status.HTTP_201_CREATED)
async def register_admin(
    body: AdminRegister,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    """Register a new admin; the caller is recorded as ``addedBy``."""
    created = await _svc(session).register_admin(body, added_by=admin.username)
    return {"data": AdminOut.model_validate(created)}


@router.get("/{admin_id}", response_model=DataResponse[AdminOut])
async def get_admin(
    admin_id: str,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    found = await _svc(session).get_admin(admin_id)
    return {"data": AdminOut.model_validate(found)}


@router.put("/{admin_id}", response_model=DataResponse[AdminOut])
async def update_admin(
    admin_id: str,
    body: AdminUpdate,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    updated = await _svc(session).update_admin(admin_id, body, updated_by=admin.username)
    return {"data": AdminOut.model_validate(updated)}


@router.delete("/{admin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admin(
    admin_id: str,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    await _svc(session).delete_admin(admin_id)
