"""Pydantic configuration models for SIWK message requests.

Parses a YAML or dict description of a message request into
[SiwkMessageFields][siwk.models.message.SiwkMessageFields]. Keys may use the
snake_case attribute names or the camelCase names of the wire format
(``networkId``, ``issuedAt``, ``expirationTime``, ``notBefore``,
``requestId``).

Field types are intentionally loose where the builder owns the rule (empty
strings, ``null`` resources): the config layer only rejects input that
cannot be represented at all, so every message-level error is reported by
the builder with its field name and provided value.

Examples:
    ```yaml
    logging:
      level: DEBUG
    message:
      address: kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn
      networkId: mainnet
      domain: example.com
      uri: https://example.com/login
      scheme: https
      nonce: 32891756abcd
      resources:
        - https://example.com/terms
    ```
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from siwk.core.exceptions import ConfigurationError
from siwk.core.yaml import load_yaml
from siwk.models.constants import SIWK_VERSION
from siwk.models.message import SiwkMessageFields


class MessageConfig(BaseModel):
    """A single message request as found in a configuration file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    address: str
    network_id: str = Field(alias="networkId")
    domain: str
    uri: str
    version: str = SIWK_VERSION
    statement: str | None = None
    nonce: str | None = None
    expiration_time: datetime | None = Field(default=None, alias="expirationTime")
    issued_at: datetime | None = Field(default=None, alias="issuedAt")
    not_before: datetime | None = Field(default=None, alias="notBefore")
    request_id: str | None = Field(default=None, alias="requestId")
    resources: list[str | None] | None = None
    scheme: str | None = None

    @field_validator("version", "nonce", "request_id", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # YAML reads `version: 1` or an all-digit nonce as int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_fields(self) -> SiwkMessageFields:
        """Convert to the immutable record consumed by the builder."""
        return SiwkMessageFields(
            address=self.address,
            network_id=self.network_id,
            domain=self.domain,
            uri=self.uri,
            version=self.version,
            statement=self.statement,
            nonce=self.nonce,
            expiration_time=self.expiration_time,
            issued_at=self.issued_at,
            not_before=self.not_before,
            request_id=self.request_id,
            resources=self.resources,
            scheme=self.scheme,
        )


class LoggingConfig(BaseModel):
    """Logging options applied by the command-line entry point."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_output: bool = False


class SiwkConfig(BaseModel):
    """Top-level configuration file layout.

    See Also:
        [load_yaml()][siwk.core.yaml.load_yaml]: Loader used by
            [from_yaml()][siwk.message.config.SiwkConfig.from_yaml].
    """

    model_config = ConfigDict(extra="forbid")

    message: MessageConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate *data* against the schema.

        Raises:
            ConfigurationError: If *data* does not match the schema.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML, or
                does not match the schema.
        """
        try:
            data = load_yaml(config_path)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(str(e)) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
        return cls.from_dict(data)
