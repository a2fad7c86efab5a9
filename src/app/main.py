"""Точка входа в приложение step-definition-service."""
from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.logging_config import get_logger, init_logging
from api import router as api_router
from services import create_orchestrator
from services.orchestrator import SERVICE_VERSION

settings = get_settings()
logger = get_logger(__name__)
orchestrator = None


app = FastAPI(title=settings.app_name)


@app.on_event("startup")
async def on_startup() -> None:
    """Действия при запуске приложения."""

    init_logging(settings.log_level)
    app.state.is_ready = False
    app.state.init_error = None
    app.state.workspace_root = settings.workspace_root

    logger.info("[Startup] Инициализация оркестратора")
    try:
        global orchestrator
        orchestrator = create_orchestrator(settings)
        app.state.orchestrator = orchestrator
        logger.info("[Startup] Оркестратор создан")
    except Exception as exc:  # pragma: no cover - ранняя инициализация
        app.state.init_error = f"Ошибка создания оркестратора: {exc}"
        logger.exception("[Startup] Не удалось создать оркестратор")
        return

    init_steps = (
        ("Инициализация настроек генератора", _initialize_generator_settings),
        ("Проверка рабочего пространства", _check_workspace_root),
    )

    for description, handler in init_steps:
        logger.info("[Startup] %s", description)
        try:
            handler(app, orchestrator)
            logger.info("[Startup] %s завершена успешно", description)
        except Exception as exc:  # pragma: no cover - ранняя инициализация
            app.state.init_error = f"{description}: {exc}"
            logger.exception("[Startup] Шаг инициализации завершился с ошибкой")
            return

    app.state.is_ready = True
    logger.info(
        "Сервис %s %s запущен на %s:%s, настройки: %s",
        settings.app_name,
        SERVICE_VERSION,
        settings.host,
        settings.port,
        settings.settings_file or "in-memory",
    )


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """Действия при остановке приложения."""

    logger.info("Сервис %s останавливается", settings.app_name)


@app.get("/health", summary="Проверка доступности сервиса")
async def healthcheck() -> dict[str, str]:
    """Простой health-endpoint."""

    is_ready = getattr(app.state, "is_ready", False)
    error = getattr(app.state, "init_error", None)
    status = "ok" if is_ready else "initializing"

    payload = {"status": status, "service": settings.app_name, "version": SERVICE_VERSION}
    if error:
        payload["error"] = error

    if not is_ready:
        return JSONResponse(status_code=503, content=payload)

    return payload


app.include_router(api_router, prefix=settings.api_prefix)


def _initialize_generator_settings(_: FastAPI, orchestrator) -> None:
    stored = orchestrator.initialize_settings()
    logger.info(
        "[Startup] Пакет: %s, класс: %s",
        stored.get("packageName"),
        stored.get("className"),
    )


def _check_workspace_root(fastapi_app: FastAPI, _orchestrator) -> None:
    workspace_root = getattr(fastapi_app.state, "workspace_root", None)
    if not workspace_root:
        logger.warning("[Startup] Корень рабочего пространства не задан, projectRoot обязателен")
        return

    if not Path(workspace_root).is_dir():
        raise RuntimeError(f"Каталог рабочего пространства не найден: {workspace_root}")

    logger.info("[Startup] Рабочее пространство: %s", workspace_root)


def main() -> None:
    """Запустить backend-сервис."""

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
