import logging
import os
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from api.pages import render_confirmation, render_error
from api.schemas.submissions import EmailAttachment, LoanSubmission, invalid_fields
from config import Config
from services.email_client import BrevoEmailClient, EmailClient
from services.email_composer import build_notification_payload
from services.errors import ClientInputError, DeliveryError, StorageError
from services.staging import ensure_upload_dir, read_as_base64, remove_staged, stage_upload

logger = logging.getLogger(__name__)

router = APIRouter()

# form part -> attachment name used when the client sent no filename
DOCUMENTS = (("pan", "pan.pdf"), ("bank", "bank.pdf"))


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_email_client(request: Request) -> EmailClient:
    return request.app.state.email_client


def parse_submission(form) -> tuple:
    """
    Split a multipart form into the applicant's details and one upload per document.

    A document part is missing when it is absent, carries a plain value instead
    of a file, or has an empty filename. Sending a document part more than once
    is rejected. All problems are reported together as one ClientInputError.
    """
    missing = []
    duplicated = []
    uploads = {}
    for key, _ in DOCUMENTS:
        parts = form.getlist(key)
        if len(parts) > 1:
            duplicated.append(key)
            continue
        upload = parts[0] if parts else None
        if not isinstance(upload, UploadFile) or not upload.filename:
            missing.append(key)
            continue
        uploads[key] = upload

    values = {name: form[name] for name in LoanSubmission.model_fields if name in form}
    submission = None
    try:
        submission = LoanSubmission(**values)
    except ValidationError as exc:
        missing = invalid_fields(exc) + missing

    if missing or duplicated:
        raise ClientInputError(missing, duplicated)
    return submission, uploads


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    return "Server is running"


async def deliver_submission(
    config: Config,
    email_client: EmailClient,
    submission: LoanSubmission,
    uploads: dict,
) -> None:
    """
    Stage both documents, email them with the applicant's details, and remove
    the staged copies whatever happens.
    """
    staged = []
    try:
        for key, fallback_name in DOCUMENTS:
            staged.append(await stage_upload(uploads[key], config.upload_dir, fallback_name))

        attachments = []
        for staged_file in staged:
            content = await read_as_base64(staged_file)
            attachments.append(EmailAttachment(name=staged_file.original_name, content=content))

        payload = build_notification_payload(config, submission, attachments)
        await email_client.send(payload)
    finally:
        for staged_file in staged:
            await remove_staged(staged_file)


@router.post("/submit", response_class=HTMLResponse)
async def submit_application(
    request: Request,
    config: Config = Depends(get_config),
    email_client: EmailClient = Depends(get_email_client),
):
    form = await request.form()
    try:
        submission, uploads = parse_submission(form)
        logger.info("Received loan application from %s", submission.name)

        try:
            await deliver_submission(config, email_client, submission, uploads)
        except DeliveryError as exc:
            logger.error("Email delivery failed (status=%s): %s", exc.status_code, exc.detail or exc)
            return render_error(request)
        except StorageError as exc:
            logger.error("Could not prepare documents: %s", exc)
            return render_error(request)
    finally:
        await form.close()

    logger.info("Loan application from %s sent", submission.name)
    return render_confirmation(request, submission.name, submission.mobile, datetime.now())


async def client_input_error_handler(request: Request, exc: ClientInputError):
    logger.warning("Rejected submission: %s", exc)
    return PlainTextResponse(str(exc), status_code=400)


def create_app(config: Config, email_client: Optional[EmailClient] = None) -> FastAPI:
    """
    Build the web application around an explicit configuration.

    `email_client` defaults to a BrevoEmailClient built from `config`; tests
    pass their own object with an async `send(payload)` method.
    """
    ensure_upload_dir(config.upload_dir)
    if email_client is None:
        email_client = BrevoEmailClient(
            api_url=config.brevo_api_url,
            api_key=config.brevo_api_key,
            timeout=config.delivery_timeout_seconds,
        )

    app = FastAPI(title="Loan Submission Service")
    app.state.config = config
    app.state.email_client = email_client
    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.include_router(router)

    if os.path.isdir(config.public_dir):
        app.mount("/static", StaticFiles(directory=config.public_dir), name="static")
    else:
        logger.warning("Public directory %s not found; static pages disabled", config.public_dir)

    return app
