import os
from typing import List

from jinja2 import Environment, FileSystemLoader

from api.schemas.submissions import (
    EmailAttachment,
    EmailRecipient,
    EmailSender,
    LoanSubmission,
    NotificationPayload,
)
from config import Config

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

# every value in the body is user input
_env = Environment(loader=FileSystemLoader(TEMPLATES_DIR), autoescape=True)


def build_subject(submission: LoanSubmission) -> str:
    return f"New Loan Application - {submission.name}"


def build_html_content(submission: LoanSubmission) -> str:
    return _env.get_template("application_email.html").render(submission=submission)


def build_notification_payload(
    config: Config, submission: LoanSubmission, attachments: List[EmailAttachment]
) -> NotificationPayload:
    """
    Compose the email that carries one loan application and its documents.
    """
    return NotificationPayload(
        sender=EmailSender(name=config.sender_name, email=config.sender_email),
        to=[EmailRecipient(email=config.receiver_email)],
        subject=build_subject(submission),
        html_content=build_html_content(submission),
        attachments=attachments,
    )
