from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_management.entrypoints.errors import register_exception_handlers
from user_management.entrypoints.middleware import RequestLoggingMiddleware
from user_management.entrypoints.routers import users
from user_management.entrypoints.security import ApiKeyGate
from user_management.services.config import Settings, settings
from user_management.services.user_service import UserService


class API(FastAPI):
    def __init__(self, config: Settings = settings) -> None:
        super().__init__(title="User Management API")

        self.state.settings = config
        self.state.user_service = UserService(seed=config.USER_MANAGEMENT_SEED_USERS)
        self.state.api_key_gate = ApiKeyGate(
            api_key=config.USER_MANAGEMENT_API_KEY,
            header_name=config.USER_MANAGEMENT_API_KEY_HEADER,
        )

        self.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self.add_middleware(RequestLoggingMiddleware)
        register_exception_handlers(self)

        @self.get("/health")
        def health() -> Dict[str, Any]:
            return {"status": "ok", "users": self.state.user_service.count()}

        self.include_router(users.router, prefix=config.USER_MANAGEMENT_URL_PREFIX, tags=["users"])


app = API()
