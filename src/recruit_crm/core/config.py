"""Application configuration management."""

from typing import Any, Dict, List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Environment variable names of the Firebase service account fields
FIREBASE_CREDENTIAL_VARS = (
    "FIREBASE_PRIVATE_KEY_ID",
    "FIREBASE_PRIVATE_KEY",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_CLIENT_ID",
    "FIREBASE_CLIENT_CERT_URL",
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Backend selection
    store_backend: str = Field(default="firestore", description="Document store: firestore, sql or memory")
    auth_provider: str = Field(default="firebase", description="Token verifier: firebase or jwt")

    # Firebase Configuration
    firebase_project_id: str = Field(default="recruitment-crm-3dd5d", description="Firebase project id")
    firebase_private_key_id: str = Field(default="", description="Service account private key id")
    firebase_private_key: str = Field(default="", description="Service account private key (PEM)")
    firebase_client_email: str = Field(default="", description="Service account client email")
    firebase_client_id: str = Field(default="", description="Service account client id")
    firebase_client_cert_url: str = Field(default="", description="Service account x509 cert URL")

    # SQL document store configuration
    database_url: str = Field(default="sqlite:///./recruit_crm.db", description="SQLAlchemy database URL")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    secret_key: str = Field(default="dev-secret-key", description="JWT secret key")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(default=60, description="Token expiry minutes")

    # Application Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")

    def missing_firebase_credentials(self) -> List[str]:
        """Return the names of credential variables that are not set."""
        return [
            name for name in FIREBASE_CREDENTIAL_VARS
            if not getattr(self, name.lower())
        ]

    def firebase_service_account(self) -> Dict[str, Any]:
        """Build the service account mapping expected by ``credentials.Certificate``."""
        private_key = self.firebase_private_key.replace("\\n", "\n").replace('"', "")
        return {
            "type": "service_account",
            "project_id": self.firebase_project_id,
            "private_key_id": self.firebase_private_key_id,
            "private_key": private_key,
            "client_email": self.firebase_client_email,
            "client_id": self.firebase_client_id,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "client_x509_cert_url": self.firebase_client_cert_url,
            "universe_domain": "googleapis.com",
        }


# Global settings instance
settings = Settings()
