"""Team Routes — the acting user's team: view, update, provision."""

from fastapi import APIRouter, Depends, status

from soccer_manager.api.dependencies import (
    get_current_user_id, get_team_service, get_provisioning_service,
)
from soccer_manager.core.domain_types import UserId
from soccer_manager.schemas.team import (
    ProvisionTeamRequest, UpdateTeamRequest, TeamResponse, TeamSnapshotResponse,
)
from soccer_manager.services.provisioning_service import TeamProvisioningService
from soccer_manager.services.team_service import TeamService

router = APIRouter(prefix="/api/v1/team", tags=["team"])


@router.get("", response_model=TeamSnapshotResponse)
async def get_my_team(
    user_id: UserId = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service),
):
    return TeamSnapshotResponse.model_validate(await service.get_my_team(user_id))


@router.patch("", response_model=TeamResponse)
async def update_team(
    body: UpdateTeamRequest,
    user_id: UserId = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service),
):
    team = await service.update_team(user_id, name=body.name, country=body.country)
    return TeamResponse.model_validate(team)


@router.post(
    "", response_model=TeamSnapshotResponse, status_code=status.HTTP_201_CREATED,
)
async def provision_team(
    body: ProvisionTeamRequest,
    user_id: UserId = Depends(get_current_user_id),
    service: TeamProvisioningService = Depends(get_provisioning_service),
):
    """Create the acting user's team with the starting budget and squad."""
    snapshot = await service.provision_team(user_id, body.name, body.country)
    return TeamSnapshotResponse.model_validate(snapshot)
