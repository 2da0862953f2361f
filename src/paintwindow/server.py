# src/paintwindow/server.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paintwindow.api import forecast, health
from paintwindow.config import get_rules
from paintwindow.core.settings import CORS_ORIGINS, LOG_LEVEL


def create_app() -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 규칙 파일이 잘못되었으면 기동 시점에 실패
    get_rules()

    app = FastAPI(title="Paint Window - Forecast API")

    # ============================================================
    # CORS 설정 (정적 프론트엔드 허용)
    # ============================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ============================================================
    # 라우터 등록
    # ============================================================
    app.include_router(forecast.router, prefix="/api")
    app.include_router(health.router)

    return app


# 앱 인스턴스 생성
app = create_app()
