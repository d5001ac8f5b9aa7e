import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"


@dataclass(frozen=True)
class Config:
    """
    Process configuration, built once at startup and handed to the app factory.
    """
    port: int = 10000
    host: str = "0.0.0.0"
    sender_email: str = ""
    sender_name: str = "Hanuman Finance"
    receiver_email: str = ""
    brevo_api_key: str = ""
    brevo_api_url: str = DEFAULT_BREVO_API_URL
    delivery_timeout_seconds: float = 30.0
    upload_dir: str = "uploads"
    public_dir: str = "public"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "Config":
        if load_dotenv_file:
            load_dotenv(override=True)

        return cls(
            port=int(os.getenv("PORT", "10000")),
            host=os.getenv("HOST", "0.0.0.0"),
            sender_email=os.getenv("SENDER_EMAIL", ""),
            sender_name=os.getenv("SENDER_NAME", "Hanuman Finance"),
            receiver_email=os.getenv("RECEIVER_EMAIL", ""),
            brevo_api_key=os.getenv("BREVO_API_KEY", ""),
            brevo_api_url=os.getenv("BREVO_API_URL", DEFAULT_BREVO_API_URL),
            delivery_timeout_seconds=float(os.getenv("DELIVERY_TIMEOUT_SECONDS", "30")),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            public_dir=os.getenv("PUBLIC_DIR", "public"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
