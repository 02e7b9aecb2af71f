from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="XRM2TS_", extra="ignore")

    app_env: str = "dev"
    app_name: str = "xrm2ts"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    output_dir: str = "generated"
    template_path: str | None = None
    placeholder_token: str = "{#rendered_content#}"
    namespace: str = "Xrm"

    typescript_file: str = "Xrm.ts"
    csharp_file: str = "Xrm.cs"

settings = Settings()
