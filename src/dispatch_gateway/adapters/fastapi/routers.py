"""FastAPI adapter – gateway and health routers.

Endpoint annotations are evaluated by FastAPI at registration time, so this
module does not use postponed annotations.
"""
from typing import Any, Awaitable, Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from dispatch_gateway.application.dispatch import MessageDispatcher
from dispatch_gateway.application.invocation import InvocationLogger

ACKNOWLEDGE = "Acknowledge"

ReadinessCheck = Callable[[], Awaitable[bool]]


def GatewayRouter(
    dispatcher: MessageDispatcher,
    invocation_logger: InvocationLogger | None = None,
    path: str = "/api/test",
) -> APIRouter:
    """Return the router exposing ``GET {path}?message=...``.

    The handler hands the message to the dispatcher and acknowledges at
    once; the publish outcome never reaches the caller.
    """
    router = APIRouter(tags=["gateway"])
    logged = invocation_logger or InvocationLogger()

    @router.get(path, response_class=PlainTextResponse)
    @logged
    async def test(message: str) -> str:
        dispatcher.dispatch(message)
        return ACKNOWLEDGE

    return router


def HealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Parameters
    ----------
    path:
        Base path prefix.  Liveness is at ``{path}/live``, readiness at
        ``{path}/ready``.
    readiness_checks:
        Optional list of async callables returning ``bool``.  All checks
        must return ``True`` for the readiness endpoint to return 200;
        otherwise it returns 503.
    tags:
        OpenAPI tags for the generated routes.
    """
    router = APIRouter(tags=tags or ["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        results: dict[str, bool] = {}
        for check in checks:
            results[getattr(check, "__name__", repr(check))] = await check()
        all_ok = all(results.values())
        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["ACKNOWLEDGE", "GatewayRouter", "HealthRouter", "ReadinessCheck"]
