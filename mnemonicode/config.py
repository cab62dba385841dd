"""
Codec settings.

Defaults reproduce the wire format; environment variables let a wrapper
change the presentation without code changes:

    MNEMONICODE_FORMAT       format template (default "x-x-x--")
    MNEMONICODE_STRICT       "0"/"false"/"no" to decode any separators
    MNEMONICODE_ABBREVIATE   "1"/"true"/"yes" to emit shortest prefixes

Empty variables fall back to the defaults. Anything pydantic cannot read as
a boolean raises pydantic.ValidationError.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mnemonicode.context.encoding import DEFAULT_FORMAT

ENV_PREFIX = "MNEMONICODE_"
FORMAT_ENV = ENV_PREFIX + "FORMAT"
STRICT_ENV = ENV_PREFIX + "STRICT"
ABBREVIATE_ENV = ENV_PREFIX + "ABBREVIATE"


class CodecSettings(BaseSettings):
    """Presentation and parsing options for MnemonicCodec."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # the template keeps its short variable name, MNEMONICODE_FORMAT
    format_template: str = Field(DEFAULT_FORMAT, validation_alias=FORMAT_ENV)
    strict: bool = True
    abbreviate: bool = False

    @property
    def uses_wire_format(self) -> bool:
        return self.format_template == DEFAULT_FORMAT

    @classmethod
    def from_env(cls) -> 'CodecSettings':
        """Settings read from the process environment."""
        return cls()
