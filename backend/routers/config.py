"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update the diff settings"""

    contextLines: int | None = None
    maxLines: int | None = None
    defaultFilename: str | None = None


class ConfigResponse(BaseModel):
    """Diff settings response"""

    contextLines: int
    maxLines: int
    defaultFilename: str


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current diff settings"""
    diff = ConfigManager.get_instance().get_config().get("diff", {})

    return ConfigResponse(
        contextLines=diff.get("contextLines", 3),
        maxLines=diff.get("maxLines", 5000),
        defaultFilename=diff.get("defaultFilename", "file"),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update diff settings"""
    if request.contextLines is not None and request.contextLines < 0:
        raise HTTPException(status_code=400, detail="contextLines must be >= 0")
    if request.maxLines is not None and request.maxLines <= 0:
        raise HTTPException(status_code=400, detail="maxLines must be > 0")
    if request.defaultFilename is not None and not request.defaultFilename.strip():
        raise HTTPException(status_code=400, detail="defaultFilename must not be empty")

    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    diff = dict(current_config.get("diff", {}))
    diff.update(request.model_dump(exclude_none=True))
    if "defaultFilename" in diff:
        diff["defaultFilename"] = diff["defaultFilename"].strip()

    config_manager.save_config({"diff": diff})

    return {"status": "success", "message": "Configuration updated", "diff": diff}
