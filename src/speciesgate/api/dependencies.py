"""Request-scoped dependencies shared by the API routes."""

from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from speciesgate.client.classifier import ClassificationClient
from speciesgate.config import Settings

_bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_classifier(request: Request) -> ClassificationClient:
    classifier: ClassificationClient = request.app.state.classifier
    return classifier


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ClassifierDep = Annotated[ClassificationClient, Depends(get_classifier)]


async def require_classify_key(
    settings: SettingsDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> None:
    """Guard the classify route with SPECIESGATE_API_KEY when one is configured.

    Only classification spends model server capacity; health stays open for probes.
    """
    if settings.api_key is None:
        return

    supplied = credentials.credentials if credentials is not None else ""
    if not secrets.compare_digest(supplied.encode(), settings.api_key.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
