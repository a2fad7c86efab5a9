"""Роуты чтения и изменения настроек генератора."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from api.schemas import GeneratorConfigDto
from services.orchestrator import Orchestrator

router = APIRouter(prefix="/settings", tags=["settings"])
logger = logging.getLogger(__name__)


def _get_orchestrator(request: Request) -> Orchestrator:
    orchestrator: Orchestrator | None = getattr(request.app.state, "orchestrator", None)
    if not orchestrator:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Orchestrator is not initialized",
        )
    return orchestrator


@router.get("", response_model=GeneratorConfigDto, summary="Текущие настройки генерации")
async def get_generator_settings(request: Request) -> GeneratorConfigDto:
    orchestrator = _get_orchestrator(request)
    return GeneratorConfigDto.model_validate(orchestrator.current_config().to_mapping())


@router.put("", response_model=GeneratorConfigDto, summary="Обновить настройки генерации")
async def update_generator_settings(
    payload: GeneratorConfigDto, request: Request
) -> GeneratorConfigDto:
    orchestrator = _get_orchestrator(request)
    try:
        config = orchestrator.update_settings(payload.to_overrides())
    except ValueError as exc:
        logger.warning("API: некорректные настройки: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return GeneratorConfigDto.model_validate(config.to_mapping())
