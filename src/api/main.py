"""
FastAPI frontend: server-rendered contact list with htmx fragments.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager
from typing import TypeVar

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ValidationError

from api.rendering import RenderError, TemplateRenderer
from api.settings import Settings
from contactbook.application import ContactService
from contactbook.infrastructure import InMemoryContactRepository

logger = logging.getLogger(__name__)


# --- dependencies ---


def get_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer


class CreateContactForm(BaseModel):
    name: str
    email: str


class SearchContactForm(BaseModel):
    q: str


FormT = TypeVar("FormT", bound=BaseModel)


async def _parse_form(request: Request, model: type[FormT]) -> FormT:
    """Validate the form body against model. Empty values are kept, missing ones are 422."""
    form = await request.form()
    try:
        return model.model_validate(dict(form))
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_input=False)) from exc


async def create_contact_form(request: Request) -> CreateContactForm:
    return await _parse_form(request, CreateContactForm)


async def search_contact_form(request: Request) -> SearchContactForm:
    return await _parse_form(request, SearchContactForm)


# --- routes ---

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/", response_class=HTMLResponse)
def index(renderer: TemplateRenderer = Depends(get_renderer)):
    return renderer.render("index.html")


@router.get("/contacts", response_class=HTMLResponse)
def list_contacts(
    service: ContactService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    return renderer.render("contact_list.html", contacts=service.list_contacts())


@router.post("/contacts", response_class=HTMLResponse)
def create_contact(
    form: CreateContactForm = Depends(create_contact_form),
    service: ContactService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    contact = service.create_contact(form.name, form.email)
    return renderer.render("contact_single_row.html", contact=contact)


@router.post("/contacts/search", response_class=HTMLResponse)
def search_contacts(
    form: SearchContactForm = Depends(search_contact_form),
    service: ContactService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    return renderer.render("contact_list.html", contacts=service.search_contacts(form.q))


async def render_error_handler(request: Request, exc: RenderError) -> HTMLResponse:
    logger.error(
        "Rendering %s failed for %s %s",
        exc.template_name,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return HTMLResponse("Internal Server Error", status_code=500)


# --- app ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Listening on: http://%s:%s", settings.host, settings.port)
    yield


def create_app(
    settings: Settings | None = None,
    *,
    service: ContactService | None = None,
) -> FastAPI:
    """Build the app. The ContactService is shared by all requests through app.state."""
    if settings is None:
        settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )

    if service is None:
        service = ContactService(InMemoryContactRepository())
        if settings.seed:
            service.seed()

    app = FastAPI(title="Contactbook", lifespan=lifespan)
    app.state.settings = settings
    app.state.contact_service = service
    app.state.renderer = TemplateRenderer(settings.templates_dir)
    app.include_router(router)
    app.add_exception_handler(RenderError, render_error_handler)
    app.mount("/assets", StaticFiles(directory=settings.assets_dir), name="assets")
    return app


app = create_app()
