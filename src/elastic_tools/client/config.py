"""Configuration for the Elasticsearch client."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ElasticConfig(BaseSettings):
    """Endpoint configuration for the Elasticsearch client.

    All settings can be configured via environment variables with ELASTIC_ prefix.

    Connection:
        - ELASTIC_BASE_URL: Where the store lives (default http://localhost:9200)
        - ELASTIC_BASIC_AUTH_USERNAME / ELASTIC_BASIC_AUTH_PASSWORD
        - ELASTIC_TIMEOUT: Request timeout in seconds

    Index naming:
        - ELASTIC_INDEX_PREFIX: Prefix for every index name
        - ELASTIC_ENVIRONMENT: Environment tag, e.g. "dev" gives "dev_answer"

    AWS request signing (Amazon OpenSearch / Elasticsearch Service):
        - ELASTIC_AWS_ENABLED=true
        - ELASTIC_AWS_ACCESS_KEY_ID / ELASTIC_AWS_SECRET_ACCESS_KEY
        - ELASTIC_AWS_REGION, ELASTIC_AWS_SERVICE
        - ELASTIC_AWS_PROFILE: resolve credentials through boto3 instead

    Instances are frozen. Build a new config to change settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="ELASTIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    base_url: str = Field(
        default="http://localhost:9200",
        validation_alias=AliasChoices("base_url", "ELASTIC_BASE_URL", "ELASTIC_URL"),
    )
    timeout: float = Field(default=30.0, gt=0.0, le=300.0)

    # Basic auth, passed to the transport as a credential pair
    basic_auth_username: str | None = Field(default=None)
    basic_auth_password: str | None = Field(default=None)

    # Index naming
    index_prefix: str | None = Field(default=None)
    environment: str | None = Field(
        default=None,
        description="Environment tag inserted between prefix and index name",
    )

    # AWS SigV4 signing
    aws_enabled: bool = Field(default=False)
    aws_access_key_id: str | None = Field(default=None)
    aws_secret_access_key: str | None = Field(default=None)
    aws_session_token: str | None = Field(default=None)
    aws_region: str | None = Field(default="us-east-1")
    aws_service: str = Field(
        default="es",
        description="Signing service name ('es' for Elasticsearch Service, 'aoss' for serverless)",
    )
    aws_profile: str | None = Field(
        default=None,
        description="AWS profile name (uses default credential chain if keys are not set)",
    )

    log_level: str = Field(default="INFO")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        """Configured basic-auth pair, or None when no username is set."""
        if not self.basic_auth_username:
            return None
        return (self.basic_auth_username, self.basic_auth_password or "")

    @property
    def signing_enabled(self) -> bool:
        """Check if AWS request signing is turned on."""
        return self.aws_enabled

    @property
    def has_static_credentials(self) -> bool:
        """Check if an access key pair is configured directly."""
        return all([self.aws_access_key_id, self.aws_secret_access_key])

    def validate_config(self) -> None:
        """Validate that signing settings are complete.

        Raises:
            ValueError: If signing is enabled without a region, with only
                half of an access key pair, or together with basic auth.
        """
        if not self.aws_enabled:
            return
        if self.basic_auth:
            raise ValueError(
                "AWS signing and basic auth both set the Authorization header. "
                "Unset ELASTIC_BASIC_AUTH_USERNAME or ELASTIC_AWS_ENABLED"
            )
        if not self.aws_region:
            raise ValueError(
                "AWS signing requires ELASTIC_AWS_REGION to be set. "
                "Example: ELASTIC_AWS_REGION=eu-west-1"
            )
        if bool(self.aws_access_key_id) != bool(self.aws_secret_access_key):
            raise ValueError(
                "AWS signing requires both ELASTIC_AWS_ACCESS_KEY_ID and "
                "ELASTIC_AWS_SECRET_ACCESS_KEY, or neither (to use a profile)"
            )
