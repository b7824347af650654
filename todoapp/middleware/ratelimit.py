import time
import asyncio
import logging
from collections import deque
from typing import Callable, Iterable
from fastapi import Request
from fastapi.responses import JSONResponse
from jose import JWTError
from todoapp.utils.security import decode_token

logger = logging.getLogger(__name__)

class RateLimitMiddleware:
    """Sliding-window limiter for the credential endpoints.

    Each key keeps the timestamps of its calls inside the window; once
    ``max_calls`` are recorded further calls get 429 until the oldest expires.
    """

    def __init__(
        self,
        app,
        *,
        window_seconds: int,
        max_calls: int,
        key_func: Callable[[Request], str],
        include_paths: Iterable[str] = ("/auth/login", "/auth/register"),
        clock: Callable[[], float] = time.monotonic,
    ):
        self.app = app
        self.window = window_seconds
        self.max_calls = max_calls
        self.key_func = key_func
        self.include_paths = frozenset(include_paths)
        self.clock = clock

        self._hits: dict[str, deque[float]] = {}
        self._lock = asyncio.Lock()

    def _drop_idle(self, cutoff: float) -> None:
        idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in idle:
            del self._hits[key]

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope.get("path", "") not in self.include_paths:
            return await self.app(scope, receive, send)

        key = self.key_func(Request(scope, receive=receive))
        now = self.clock()
        cutoff = now - self.window
        async with self._lock:
            self._drop_idle(cutoff)
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()

            if len(hits) >= self.max_calls:
                retry_after = max(1, int(hits[0] + self.window - now))
                logger.warning("rate limit hit for %s on %s", key, scope.get("path"))
                resp = JSONResponse(
                    status_code=429,
                    content={"detail": "too many requests", "try_again_in": retry_after},
                    headers={"Retry-After": str(retry_after)},
                )
                return await resp(scope, receive, send)

            hits.append(now)

        return await self.app(scope, receive, send)


def make_key_func(secret_key: str) -> Callable[[Request], str]:
    """Key by token subject when a valid bearer token is sent, else by client IP."""
    def _key(req: Request) -> str:
        auth = req.headers.get("authorization", "")
        if auth.lower().startswith("bearer "):
            try:
                sub = decode_token(auth.split(" ", 1)[1].strip(), secret_key).get("sub")
                if sub:
                    return f"user:{sub}"
            except JWTError:
                pass

        return f"ip:{req.client.host if req.client else 'unknown'}"
    return _key
