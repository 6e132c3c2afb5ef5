from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from line_reader.domain.encodings import require_known_encoding, require_lf_encoding

# Config models map YAML sections to typed structures; unknown keys are rejected everywhere.


class InputConfig(BaseModel):
    # Decoding settings applied to every line read from the source file.
    model_config = ConfigDict(extra="forbid")
    encoding: str = "utf-8"
    decode_errors: Literal["strict", "replace"] = "strict"

    @field_validator("encoding")
    @classmethod
    def lf_delimited_encoding(cls, value: str) -> str:
        require_lf_encoding(value)
        return value


class OutputConfig(BaseModel):
    # Output goes to stdout unless kind == "file".
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    kind: Literal["stdout", "file"] = "stdout"
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file", "file_path"))
    encoding: str = "utf-8"
    atomic_replace: bool = False

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, value: str) -> str:
        require_known_encoding(value)
        return value

    @model_validator(mode="after")
    def require_file_for_file_kind(self) -> OutputConfig:
        if self.kind == "file" and not self.file_path:
            raise ValueError("output.file is required when output.kind is 'file'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["debug", "info", "warning", "error"] = "info"
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def require_path_for_jsonl(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # Root config; every section is optional so an empty run needs only version.
    model_config = ConfigDict(extra="forbid")
    version: int
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
