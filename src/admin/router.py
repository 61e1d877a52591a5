from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .schemas import DashboardData
from .admin_service import DashboardService
from ..database import get_db
from ..auth.dependencies import require_admin
from ..auth.schemas import TokenClaims

router = APIRouter()

@router.get("/dashboard", response_model=DashboardData)
def get_dashboard(
    admin: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Get admin dashboard data"""
    return DashboardService(db).get_dashboard()
