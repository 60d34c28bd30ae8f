from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Storage
    storage_backend: str = "memory"
    supabase_url: str = ""
    supabase_key: str = ""
    otp_table: str = "otps"
    password_table: str = "passwords"

    # Server
    host: str = "0.0.0.0"
    port: int = 8091
    log_level: str = "info"

    # OTP
    otp_length: int = 6
    otp_expire_minutes: int = 15
    otp_single_use: bool = False

    # Messaging
    messaging_provider: str = "console"
    sms_gateway_url: str = ""
    whatsapp_gateway_url: str = ""
    push_gateway_url: str = ""
    gateway_api_key: str = ""
    gateway_timeout_seconds: float = 10.0

    # SMTP
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from_email: str = "noreply@wutsi.com"

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
