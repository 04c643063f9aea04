from pathlib import Path
from typing import List, Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Anant Polymers Contact API"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_DIR: str = "logs"

    # ── Email Configuration ─────────────────────
    MAIL_HOST: str = "smtp.gmail.com"
    MAIL_PORT: int = 587
    MAIL_USERNAME: str = Field(default="", validation_alias=AliasChoices("MAIL_USERNAME", "EMAIL_USER"))
    MAIL_PASSWORD: str = Field(default="", validation_alias=AliasChoices("MAIL_PASSWORD", "EMAIL_PASS"))
    MAIL_ENCRYPTION: str = "tls"
    MAIL_TIMEOUT: int = 30
    MAIL_FROM_ADDRESS: str = "admin@anantpolymers.com"
    MAIL_NOREPLY_ADDRESS: str = "noreply@anantpolymers.com"
    MAIL_SALES_ADDRESS: str = "sales@anantpolymers.com"

    EMAIL_RELAY_URL: str = ""
    EMAIL_RELAY_API_KEY: str = ""
    EMAIL_RELAY_TIMEOUT: int = 30

    # ── Company footer ──────────────────────────
    COMPANY_NAME: str = "Anant Polymers"
    COMPANY_ADDRESS: str = "A-65, Swastik industrial park, Kuha, Ahmedabad, BHARAT (India)"
    COMPANY_PHONE: str = "+91 79902 46779"

    # ── OTP ─────────────────────────────────────
    OTP_EXPIRE_MINUTES: int = 10
    OTP_SWEEP_INTERVAL_MINUTES: int = 5
    OTP_SWEEP_ENABLED: bool = True

    # ── HTTP ────────────────────────────────────
    CORS_ORIGINS: List[str] = ["*"]

    CSP_SCRIPT_SRC: List[str] = ["https://cdnjs.cloudflare.com", "https://cdn.jsdelivr.net"]
    CSP_STYLE_SRC: List[str] = [
        "'unsafe-inline'",
        "https://fonts.googleapis.com",
        "https://cdn.jsdelivr.net",
    ]
    CSP_FONT_SRC: List[str] = ["https://fonts.gstatic.com"]
    CSP_IMG_SRC: List[str] = ["data:", "https:"]
    CSP_CONNECT_SRC: List[str] = ["https://anant-server.vercel.app"]

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True

    @property
    def mail_configured(self) -> bool:
        if self.EMAIL_RELAY_URL and self.EMAIL_RELAY_API_KEY:
            return True
        return bool(self.MAIL_USERNAME and self.MAIL_PASSWORD)


settings = Settings()
