#!/usr/bin/env python3
"""
Settings Bridge - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Serves the API (started by settingsbridge.__main__)

All business logic is in the modules, following black box principles.
"""

import logging
import logging.config as log_config
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from settingsbridge import __version__
from settingsbridge.config.provider import ConfigProvider, EnvConfigProvider
from settingsbridge.logging_config import get_logging_config

# Import modules through their black box interfaces
from settingsbridge.modules.api import (
    LaunchHistoryResponse,
    MethodCallRequest,
    MethodCallResponse,
)
from settingsbridge.modules.bridge import MethodCall, MethodChannel
from settingsbridge.modules.config import get_config
from settingsbridge.modules.platform import PlatformFactory, SimulatedDevice

# Get configuration
config = get_config()

log_config.dictConfig(get_logging_config(config.get("log_level")))
logger = logging.getLogger("settingsbridge.main")

# Configuration provider (centralized config access)
config_provider: ConfigProvider = EnvConfigProvider()

# Module instances (initialized at startup)
device: Optional[SimulatedDevice] = None
channel: Optional[MethodChannel] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - initialize and cleanup resources.
    """
    global device, channel

    # Startup
    logger.info("Starting Settings Bridge...")

    try:
        device = PlatformFactory.build(config_provider)
    except ValueError as e:
        logger.error(f"Invalid device configuration: {e}")
        raise RuntimeError("Settings Bridge initialization failed") from e

    channel = MethodChannel(device, name=config.get("channel_name"))
    logger.info(f"Channel {channel.name} ready")

    yield

    # Shutdown
    logger.info("Shutting down Settings Bridge...")
    channel = None
    device = None


# Create FastAPI application
app = FastAPI(
    title="Settings Bridge",
    description="Opens platform settings screens on behalf of a host application",
    version=__version__,
    lifespan=lifespan,
)


def require_device() -> SimulatedDevice:
    if not device:
        raise HTTPException(503, "Service not initialized")
    return device


# Channel Endpoints


@app.post("/channels/{channel_name}/invoke", response_model=MethodCallResponse)
async def invoke_method(channel_name: str, request: MethodCallRequest):
    """
    Deliver one method call to a channel.

    Returns:
        200: Reply (success, error or notImplemented)
        404: Unknown channel
        503: Service not initialized
    """
    if not channel:
        raise HTTPException(503, "Service not initialized")

    if channel_name != channel.name:
        raise HTTPException(404, f"Unknown channel: {channel_name}")

    reply = channel.handle(MethodCall(method=request.method, arguments=request.arguments))
    return MethodCallResponse(channel=channel.name, method=request.method, **reply.to_dict())


# Debug Endpoints


@app.get("/debug/device")
async def get_device():
    """Describe the simulated device."""
    return require_device().describe()


@app.get("/debug/launches", response_model=LaunchHistoryResponse)
async def list_launches():
    """List screens the device has shown, oldest first."""
    launches = require_device().launches
    return LaunchHistoryResponse(
        count=len(launches),
        launches=[record.to_dict() for record in launches],
    )


@app.delete("/debug/launches", status_code=204)
async def clear_launches():
    """Forget the launch history."""
    removed = require_device().clear_launches()
    logger.info(f"Cleared {removed} launch records")
    return Response(status_code=204)


# Health Endpoints


@app.get("/healthz")
async def healthz():
    """Liveness check - the process is up."""
    return {"status": "ok"}


@app.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns:
        200: Service healthy
        503: Service unhealthy
    """
    modules_ready = all([device, channel])
    environment = config.get("environment", "development")

    if modules_ready:
        return {
            "status": "healthy",
            "modules": "initialized",
            "channel": channel.name,
            "environment": environment,
            "version": __version__,
        }
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "modules": "not initialized",
            "environment": environment,
        },
    )

