from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # Общий секрет для шифрования содержимого; пустое значение - хранение открытым текстом
    data_enc_key: Optional[str] = None

    log_level: str = "INFO"
    sql_echo: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
