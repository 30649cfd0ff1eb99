from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn
from app.database import engine
from app.errors import InternalError, UnknownSessionError
from app.logger import app_logger
from app.responses import Status, response
from app.routers import vip
from app import models


models.Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="VIP",
    description="Active/standby virtual IP failover",
    version="1.0.0",
)


def describe_validation_error(exc: RequestValidationError) -> str:
    reasons = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        reasons.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(reasons)


@app.exception_handler(RequestValidationError)
async def invalid_parameter_handler(request: Request, exc: RequestValidationError):
    message = f"failed to decode param: {describe_validation_error(exc)}"
    app_logger.debug(f"{request.url.path} from {request.client.host if request.client else 'unknown'}: {message}")
    return JSONResponse(content=response(Status.INVALID_PARAMETER, message=message))


@app.exception_handler(UnknownSessionError)
async def unknown_session_handler(request: Request, exc: UnknownSessionError):
    return JSONResponse(content=response(Status.UNKNOWN_SESSION, message=str(exc)))


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    return JSONResponse(
        content=response(Status.INTERNAL_SERVER_ERROR, message=f"failed to process {request.url.path}")
    )


app.include_router(vip.router, prefix="/api/v1/vip", tags=["vip"])

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8081)
