# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wiring check for embedding model configuration.

Loads configuration, runs the wiring and reports whether the embedding
model would be provided and how it is configured. No request is sent.

Usage:
    python -m omniembedding.runtime.check
    python -m omniembedding.runtime.check --config /etc/omniembedding/embedding.yaml

Exit codes:
    0: embedding model wired and built
    1: configuration error
    2: embedding model not provided (conditions unmet)
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import TYPE_CHECKING

import yaml

from omniembedding.constants import CAPABILITY_EMBEDDING_MODEL
from omniembedding.exceptions import ConfigurationError
from omniembedding.models.model_autoconfig_settings import (
    ModelEmbeddingAutoconfigSettings,
)
from omniembedding.runtime.wiring import build_registry
from omniembedding.utils.redaction import mask_secret

if TYPE_CHECKING:
    from omniembedding.clients.openai_embedding_model import OpenAiEmbeddingModel

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NOT_PROVIDED = 2


def _get_log_level() -> int:
    """Get log level from environment with safe fallback."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def describe_model(model: OpenAiEmbeddingModel) -> str:
    """Return a multi-line, secret-free description of ``model``."""
    api = model.api
    lines = [
        f"base_url:        {api.base_url}",
        f"api_key:         {mask_secret(api.api_key)}",
        f"embeddings_url:  {api.embeddings_url}",
        f"completions_url: {api.completions_url}",
        f"headers:         {', '.join(sorted(api.headers)) or '(none)'}",
        f"model:           {model.options.model}",
        f"dimensions:      {model.dimensions() or '(model default)'}",
        f"metadata_mode:   {model.metadata_mode.value}",
    ]
    return "\n".join(lines)


def run_check(settings: ModelEmbeddingAutoconfigSettings) -> int:
    """Wire and build the embedding model, printing the result.

    Returns:
        Process exit code.
    """
    registry = build_registry(settings)
    if not registry.contains(CAPABILITY_EMBEDDING_MODEL):
        print("embedding model: not provided")
        return EXIT_NOT_PROVIDED

    try:
        model = registry.get(CAPABILITY_EMBEDDING_MODEL)
    except ConfigurationError as exc:
        logger.error("Embedding model configuration invalid: %s", exc)
        return EXIT_CONFIG_ERROR

    print("embedding model: openai")
    print(describe_model(model))
    model.close()
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the wiring check."""
    parser = argparse.ArgumentParser(description="Embedding model wiring check")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML configuration file (default: read environment variables)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        if args.config:
            settings = ModelEmbeddingAutoconfigSettings.from_yaml(args.config)
        else:
            settings = ModelEmbeddingAutoconfigSettings.from_environment()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        # pydantic ValidationError is a ValueError
        logger.error("Failed to load embedding configuration: %s", exc)
        return EXIT_CONFIG_ERROR

    return run_check(settings)


if __name__ == "__main__":
    raise SystemExit(main())
