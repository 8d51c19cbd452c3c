# src/errorgate/api/v1/error_handlers.py
"""
FastAPI exception handlers for the two application exception families.

- APIException  -> JSONResponse built from a StructuredResult
- ViewException -> RedirectResponse to a configured error page, or the rendered
                   error view (Jinja2 template "<view_name>.html")

Both handlers delegate the decision to the ErrorTranslator stored on `app.state`;
this module only turns its output into Starlette responses. Any other exception is
left to FastAPI's default handling (500).

How to use (from the app factory):
    app = FastAPI()
    register_exception_handlers(app, settings)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.templating import Jinja2Templates

from errorgate.config.settings import Settings
from errorgate.core.status import StatusDescriptor
from errorgate.exceptions.base import APIException, ViewException
from errorgate.exceptions.mapper import ErrorTranslator
from errorgate.schemas.result import Redirect

REDIRECT_STATUS = 302
# statuses whose responses must not carry a body
BODYLESS_STATUSES = frozenset({204, 205, 304})


def transport_status(status: StatusDescriptor) -> int:
    """
    HTTP status for an API result.

    Codes that are valid HTTP statuses (100..599) are used as-is; application codes
    such as 0 or 4006 ride inside the body of a 200 response.
    """
    code = getattr(status, "code", None)
    if isinstance(code, int) and 100 <= code <= 599:
        return code
    return 200


def render_status(http_status: int) -> int:
    """
    HTTP status for a rendered error page.

    The page keeps the exception's status unless that status cannot carry a body
    (1xx, 204, 205, 304); those are served as 200. The model still reports the
    original status.
    """
    if http_status < 200 or http_status in BODYLESS_STATUSES:
        return 200
    return http_status


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    translator: ErrorTranslator = request.app.state.error_translator
    result = translator.translate(exc)
    return JSONResponse(status_code=transport_status(result.status), content=jsonable_encoder(result))


async def view_exception_handler(request: Request, exc: ViewException) -> Response:
    translator: ErrorTranslator = request.app.state.error_translator
    instruction = translator.translate(exc)

    if isinstance(instruction, Redirect):
        return RedirectResponse(url=instruction.url, status_code=REDIRECT_STATUS)

    templates: Jinja2Templates = request.app.state.error_templates
    # TemplateResponse adds "request" to the context; hand it a copy of the model
    return templates.TemplateResponse(
        request,
        f"{instruction.view_name}.html",
        dict(instruction.model),
        status_code=render_status(instruction.model["status"]),
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Build the translator and templates once and attach both handlers to `app`."""
    app.state.error_translator = ErrorTranslator.from_settings(settings)
    app.state.error_templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(ViewException, view_exception_handler)
