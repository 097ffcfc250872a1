"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from balcony.core.constraints import params_from_preset
from balcony.core.errors import PresetNotFound
from balcony.data import catalogue
from balcony.models import BalconyParams, Manufacturer, Preset
from balcony.services.layout_service import LayoutService
from balcony.api.schemas import ErrorResponse, LayoutRequest, LayoutResponse, RuleInfo

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse}}

# Shared service instance
_service = LayoutService()


@router.post(
    "/layout",
    response_model=LayoutResponse,
    responses={422: {"model": ErrorResponse}, **_NOT_FOUND},
)
async def generate_layout(request: LayoutRequest) -> LayoutResponse:
    """Compute the placement list for a balcony."""
    params = _service.resolve_params(request.params, request.preset_id)
    layout = _service.generate(params, config=request.config)

    return LayoutResponse(
        layout=layout,
        params=params,
        rule_count=len(_service.list_rules()),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available layout rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/manufacturers", response_model=list[Manufacturer])
async def list_manufacturers() -> list[Manufacturer]:
    return catalogue.all_manufacturers()


@router.get("/manufacturers/{slug}/presets", response_model=list[Preset], responses=_NOT_FOUND)
async def list_presets(slug: str) -> list[Preset]:
    if catalogue.get_manufacturer(slug) is None:
        raise PresetNotFound("Manufacturer", slug)
    return catalogue.presets_for_manufacturer(slug)


def _require_preset(preset_id: str) -> Preset:
    preset = catalogue.get_preset(preset_id)
    if preset is None:
        raise PresetNotFound("Preset", preset_id)
    return preset


@router.get("/presets/{preset_id}", response_model=Preset, responses=_NOT_FOUND)
async def get_preset(preset_id: str) -> Preset:
    return _require_preset(preset_id)


@router.get("/presets/{preset_id}/defaults", response_model=BalconyParams, responses=_NOT_FOUND)
async def get_preset_defaults(preset_id: str) -> BalconyParams:
    """Parameters the configurator opens with for a preset."""
    return params_from_preset(_require_preset(preset_id))


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
