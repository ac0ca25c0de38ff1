"""Health check and store settings"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from metalbaza.container import Container, get_container
from metalbaza.domain.repositories.company_settings_repository import CompanySettings
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.infrastructure.database.operations import get_db_manager
from metalbaza.presentation.api.dependencies import require_admin
from metalbaza.presentation.api.schemas import CompanySettingsOut, UpdateCompanySettingsIn

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check():
    """Database health"""
    health = get_db_manager().health_check()
    status_code = 200 if health["status"] == "healthy" else 503
    return JSONResponse(status_code=status_code, content=health)


@router.get("/api/company-settings", response_model=CompanySettingsOut)
async def company_settings(container: Container = Depends(get_container)):
    settings = await container.get_company_settings_repository().get_settings()
    return CompanySettingsOut(is_delivery=settings.is_delivery)


@router.put("/api/company-settings", response_model=CompanySettingsOut)
async def update_company_settings(
    payload: UpdateCompanySettingsIn,
    admin: UserInfo = Depends(require_admin),
    container: Container = Depends(get_container),
):
    """Switch store-wide delivery on or off (admin)"""
    logger.info("⚙️ COMPANY SETTINGS CHANGE by admin %s: delivery=%s", admin.id, payload.is_delivery)
    settings = await container.get_company_settings_repository().update_settings(
        CompanySettings(is_delivery=payload.is_delivery)
    )
    return CompanySettingsOut(is_delivery=settings.is_delivery)
