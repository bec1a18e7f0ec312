from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "southend"
    admin_email: str = ""
    email_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_timeout: float = 30.0
    frontend_origins: str = ""
    port: int = 5000
    log_level: str = "INFO"
    popup_file: str = "popup.json"
    overwrite_description_on_empty: bool = True
    strict_name_allow_list: bool = False
    with_location: bool = True
    default_avatar: str = "./images/testimonial.jpg"

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.frontend_origins.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def mail_configured(self) -> bool:
        return bool(self.admin_email and self.email_pass)
