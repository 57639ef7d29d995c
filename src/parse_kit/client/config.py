# src/parse_kit/client/config.py

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

API_KEY_ENV = "LLAMA_CLOUD_API_KEY"
BASE_URL_ENV = "LLAMA_CLOUD_BASE_URL"
DEFAULT_BASE_URL = "https://api.cloud.llamaindex.ai/api/parsing"

# Options that only steer the local client and never reach the service.
LOCAL_OPTIONS = frozenset(
    {
        "result_type",
        "num_workers",
        "check_interval",
        "max_timeout",
        "verbose",
        "show_progress",
        "ignore_errors",
    }
)


class ResultType(str, Enum):
    """Representation requested from the result endpoint."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class ParseOptions(BaseModel):
    """Parse options, fixed once per client.

    Immutable. Unknown keys are accepted and forwarded to the service
    untouched, so new API parameters work without a client release.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    # Local behaviour
    result_type: ResultType = ResultType.TEXT
    num_workers: int = Field(default=4, ge=1)
    check_interval: float = Field(default=1, ge=0)
    max_timeout: float = Field(default=2000, ge=0)
    verbose: bool = True
    show_progress: bool = True
    ignore_errors: bool = True

    # Forwarded to the service
    language: str = "en"
    parsing_instruction: str = ""
    skip_diagonal_text: bool = False
    invalidate_cache: bool = False
    do_not_cache: bool = False
    fast_mode: bool = False
    premium_mode: bool = False
    continuous_mode: bool = False
    do_not_unroll_columns: bool = False
    page_separator: str | None = None
    page_prefix: str | None = None
    page_suffix: str | None = None
    gpt4o_mode: bool = False
    gpt4o_api_key: str | None = None
    guess_xlsx_sheet_names: bool = False
    bounding_box: str | None = None
    target_pages: str | None = None
    vendor_multimodal_api_key: str | None = None
    use_vendor_multimodal_model: bool = False
    vendor_multimodal_model_name: str | None = None
    take_screenshot: bool = False
    disable_ocr: bool = False
    is_formatting_instruction: bool = False
    annotate_links: bool = False
    webhook_url: str | None = None
    azure_openai_deployment_name: str | None = None
    azure_openai_endpoint: str | None = None
    azure_openai_api_version: str | None = None
    azure_openai_key: str | None = None
    http_proxy: str | None = None

    def form_fields(self) -> dict[str, str]:
        """Every non-null forwarded option, encoded as form values."""
        fields: dict[str, str] = {}
        for name, value in self.model_dump(mode="json", exclude=set(LOCAL_OPTIONS)).items():
            if value is None:
                continue
            fields[name] = _form_value(value)
        return fields


@dataclass(frozen=True)
class ClientConfig:
    """Resolved client configuration.

    Immutable. Built once, then threaded through every operation.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0
    options: ParseOptions = field(default_factory=ParseOptions)


def resolve_config(
    api_key: str | None = None,
    options: Mapping[str, Any] | None = None,
    *,
    base_url: str | None = None,
    timeout: float = 60.0,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Merge defaults, environment credentials and explicit overrides.

    Args:
        api_key: Explicit credential. Falls back to LLAMA_CLOUD_API_KEY.
        options: Overrides for ParseOptions. Explicit values win; unknown
            keys pass through.
        base_url: Service endpoint. Falls back to LLAMA_CLOUD_BASE_URL, then
            the public endpoint.
        timeout: Per-request HTTP timeout in seconds.
        environ: Environment mapping, os.environ when omitted.

    Raises:
        ConfigurationError: No credential, or an option fails validation.
    """
    env = os.environ if environ is None else environ

    resolved_key = api_key or env.get(API_KEY_ENV)
    if not resolved_key:
        raise ConfigurationError(f"API key is required (pass api_key or set {API_KEY_ENV})")

    try:
        parse_options = ParseOptions(**dict(options or {}))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid parse options: {exc}") from exc

    return ClientConfig(
        api_key=resolved_key,
        base_url=base_url or env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
        timeout=timeout,
        options=parse_options,
    )


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)
