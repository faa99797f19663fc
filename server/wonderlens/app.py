"""FastAPI 应用工厂 + lifespan。"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from wonderlens.api.protocol import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    HealthResponse,
    parse_skip_audio,
)
from wonderlens.config import Settings, load_settings
from wonderlens.errors import MissingInput, UpstreamAnalysisFailure
from wonderlens.pipeline.orchestrator import Orchestrator
from wonderlens.pipeline.speech import SpeechClient
from wonderlens.pipeline.vision import VisionClient

logger = logging.getLogger(__name__)

_ANALYZE_PATH = "/api/analyze"
_GENERIC_ANALYSIS_ERROR = "An error occurred while analyzing the image. Please try again."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """启动/关闭生命周期管理。"""
    settings: Settings = app.state.settings

    # 1. 日志
    logging.basicConfig(
        level=getattr(logging, settings.server.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # 2. 外部服务客户端（懒加载，缺 key 不阻塞启动）
    vision = VisionClient(settings.vision)
    speech = SpeechClient(settings.speech)
    if not vision.is_configured:
        logger.warning("OPENAI_API_KEY is not set")
    if not speech.is_configured:
        logger.warning("ELEVENLABS_API_KEY is not set")

    # 3. Orchestrator
    orchestrator = Orchestrator(vision, speech, debug=settings.server.debug)

    app.state.vision = vision
    app.state.speech = speech
    app.state.orchestrator = orchestrator

    yield

    await vision.close()
    await speech.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """创建 FastAPI 应用。"""
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Wonderlens Server", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MissingInput)
    async def missing_input_handler(request: Request, exc: MissingInput):
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True))

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        # 分析接口的请求体不合法时与缺图同样处理
        if request.url.path == _ANALYZE_PATH:
            return await missing_input_handler(request, MissingInput())
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(UpstreamAnalysisFailure)
    async def upstream_failure_handler(request: Request, exc: UpstreamAnalysisFailure):
        if settings.server.debug:
            cause = exc.__cause__
            body = ErrorResponse(error=str(exc), details=repr(cause) if cause else None)
        else:
            body = ErrorResponse(error=_GENERIC_ANALYSIS_ERROR)
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Starting"

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(
            openaiConfigured=app.state.vision.is_configured if hasattr(app.state, "vision") else False,
            elevenlabsConfigured=app.state.speech.is_configured if hasattr(app.state, "speech") else False,
        )

    @app.post(
        _ANALYZE_PATH,
        responses={
            200: {"model": AnalyzeResponse},
            400: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def analyze(body: AnalyzeRequest | None = None, skipAudio: str | None = None):
        orchestrator: Orchestrator = app.state.orchestrator
        skip_audio = parse_skip_audio(skipAudio, default=settings.skip_audio)
        body = body or AnalyzeRequest()
        result = await orchestrator.analyze(body.base64Image, body.mode, skip_audio=skip_audio)
        return JSONResponse(content=result.to_response())

    static_dir = settings.server.static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.debug("Static directory %s not found, not serving client bundle", static_dir)

    return app
