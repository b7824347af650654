import asyncio
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from todoapp.errors import TransientError

logger = logging.getLogger(__name__)

def make_timeout_middleware(timeout_seconds: float):
    async def timeout_middleware(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("%s %s exceeded %.1fs", request.method, request.url.path, timeout_seconds)
            err = TransientError("request timed out")
            return JSONResponse(status_code=err.status_code, content={"detail": err.message})
    return timeout_middleware
