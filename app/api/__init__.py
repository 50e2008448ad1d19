"""API routes mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import auth, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])


@router.get("")
def api_info() -> dict[str, str]:
    """API root; liveness and discovery."""
    return {"message": "Accounts API is running"}
