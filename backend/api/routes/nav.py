"""
Sidebar navigation.
"""
from fastapi import APIRouter

from api.schemas import LinkGroupOut, NavResponse, SidebarLinkOut
from domain.nav import ADDITIONAL_LINKS, DEFAULT_LINKS

router = APIRouter()


@router.get("", response_model=NavResponse)
async def get_nav():
    return NavResponse(
        default_links=[SidebarLinkOut.model_validate(link) for link in DEFAULT_LINKS],
        additional_links=[LinkGroupOut.model_validate(group) for group in ADDITIONAL_LINKS],
    )
