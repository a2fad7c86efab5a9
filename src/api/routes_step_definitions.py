"""Роуты генерации step definitions и быстрых команд."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException, Request, status

from api.schemas import (
    AboutResponse,
    CreateStepFileRequest,
    CreateStepFileResponse,
    FileStatusDto,
    GenerateStepDefinitionsRequest,
    GenerateStepDefinitionsResponse,
    HostRequest,
    NotificationDto,
    ParsedStepDto,
    QuickActionDto,
    QuickActionResponse,
    RenderStepDefinitionsRequest,
    RenderStepDefinitionsResponse,
)
from domain.models import GenerationResult
from infrastructure.fs_repo import FsRepository
from infrastructure.request_host import RequestHost
from services import _serialize_parsed_step
from services.orchestrator import Orchestrator

router = APIRouter(prefix="/step-definitions", tags=["step-definitions"])
logger = logging.getLogger(__name__)


def _get_orchestrator(request: Request) -> Orchestrator:
    orchestrator: Orchestrator | None = getattr(request.app.state, "orchestrator", None)
    if not orchestrator:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Orchestrator is not initialized",
        )
    return orchestrator


def _build_host(payload: HostRequest, request: Request, **extra_answers: str) -> RequestHost:
    project_root = payload.project_root or getattr(request.app.state, "workspace_root", None)
    answers: dict[str, Any] = dict(payload.answers)
    for key, value in extra_answers.items():
        if value is not None:
            answers.setdefault(key, value)
    return RequestHost(
        document_text=payload.document_text,
        selection_text=payload.selection_text,
        document_name=payload.document_name,
        fs_repo=FsRepository(project_root) if project_root else None,
        answers=answers,
    )


def _to_step_dtos(result: GenerationResult | None) -> list[ParsedStepDto]:
    if not result:
        return []
    return [
        ParsedStepDto.model_validate(_serialize_parsed_step(method.step, method))
        for method in result.methods
    ]


def _host_effects(host: RequestHost) -> dict[str, Any]:
    return {
        "clipboard_text": host.clipboard,
        "preview": host.preview,
        "notifications": [NotificationDto(**asdict(item)) for item in host.notifications],
    }


def _overrides(payload: HostRequest | RenderStepDefinitionsRequest) -> dict[str, Any] | None:
    return payload.overrides.to_overrides() if payload.overrides else None


@router.post(
    "/generate",
    response_model=GenerateStepDefinitionsResponse,
    summary="Сгенерировать step definitions по документу или выделению",
)
async def generate_step_definitions(
    payload: GenerateStepDefinitionsRequest, request: Request
) -> GenerateStepDefinitionsResponse:
    orchestrator = _get_orchestrator(request)
    host = _build_host(payload, request)
    outcome = orchestrator.generate_step_definitions(
        host, selection_only=payload.selection_only, overrides=_overrides(payload)
    )
    result: GenerationResult | None = outcome.get("result")
    file_status = outcome.get("fileStatus")
    logger.info("API: generate step definitions -> %s", outcome["status"])
    return GenerateStepDefinitionsResponse(
        status=outcome["status"],
        code=result.code if result else None,
        steps_count=result.steps_count if result else 0,
        steps=_to_step_dtos(result),
        skipped_lines=list(result.skipped_lines) if result else [],
        selection_info=outcome.get("selectionInfo"),
        follow_up=outcome.get("followUp"),
        file_status=FileStatusDto.model_validate(file_status) if file_status else None,
        **_host_effects(host),
    )


@router.post(
    "/render",
    response_model=RenderStepDefinitionsResponse,
    summary="Сгенерировать код по строкам шагов без побочных эффектов",
)
async def render_step_definitions(
    payload: RenderStepDefinitionsRequest, request: Request
) -> RenderStepDefinitionsResponse:
    orchestrator = _get_orchestrator(request)
    text = payload.text if payload.steps is None else "\n".join(payload.steps)
    result = orchestrator.generate_code(text, _overrides(payload))
    return RenderStepDefinitionsResponse(
        code=result.code,
        steps_count=result.steps_count,
        steps=_to_step_dtos(result),
        skipped_lines=list(result.skipped_lines),
    )


@router.post(
    "/file",
    response_model=CreateStepFileResponse,
    summary="Создать файл step definitions в проекте",
)
async def create_step_file(payload: CreateStepFileRequest, request: Request) -> CreateStepFileResponse:
    orchestrator = _get_orchestrator(request)
    host = _build_host(payload, request, fileName=payload.file_name)
    file_status = orchestrator.create_step_file(host, payload.content)
    return CreateStepFileResponse(
        file_status=FileStatusDto.model_validate(file_status),
        **_host_effects(host),
    )


@router.get("/quick-actions", response_model=list[QuickActionDto], summary="Список быстрых команд")
async def list_quick_actions(request: Request) -> list[QuickActionDto]:
    orchestrator = _get_orchestrator(request)
    return [QuickActionDto.model_validate(item) for item in orchestrator.quick_actions()]


@router.post(
    "/quick-actions/{action}",
    response_model=QuickActionResponse,
    summary="Выполнить быструю команду",
)
async def run_quick_action(
    action: str, payload: GenerateStepDefinitionsRequest, request: Request
) -> QuickActionResponse:
    orchestrator = _get_orchestrator(request)
    host = _build_host(payload, request)
    try:
        outcome = orchestrator.run_quick_action(action, host)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    result = outcome.pop("result", None)
    if isinstance(result, GenerationResult):
        outcome["code"] = result.code
        outcome["stepsCount"] = result.steps_count
    return QuickActionResponse(
        action=action,
        status=outcome.get("status", "ok"),
        payload=outcome,
        **_host_effects(host),
    )


@router.get("/about", response_model=AboutResponse, summary="Информация о сервисе")
async def about(request: Request) -> AboutResponse:
    orchestrator = _get_orchestrator(request)
    return AboutResponse(message=orchestrator.about())
