"""Loading the YAML log code catalog."""

import logging
import os

import yaml

from logcodes.models import Catalog, LogCode

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "LOG_CODES_YAML"


class CatalogError(Exception):
    """The catalog could not be located, read, or parsed."""


def parse_catalog(text: str) -> Catalog:
    """Parse catalog YAML text.

    Expects a top-level ``logCodes`` sequence and an optional ``appName``.
    An empty document yields an empty catalog.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f"cannot unmarshal yaml: {e}") from e

    if data is None:
        return Catalog()
    if not isinstance(data, dict):
        raise CatalogError("cannot unmarshal yaml: top-level document must be a mapping")

    entries = data.get("logCodes") or []
    if not isinstance(entries, list):
        raise CatalogError("cannot unmarshal yaml: 'logCodes' must be a sequence")

    log_codes = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(f"cannot unmarshal yaml: logCodes[{i}] must be a mapping")
        try:
            log_codes.append(LogCode.from_dict(entry))
        except (TypeError, ValueError) as e:
            raise CatalogError(f"cannot unmarshal yaml: logCodes[{i}]: {e}") from e

    app_name = data.get("appName")
    return Catalog(
        log_codes=tuple(log_codes),
        app_name=str(app_name) if app_name is not None else None,
    )


def load_catalog(path: str) -> Catalog:
    """Read and parse the catalog file at ``path``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"cannot read file: {e}") from e

    catalog = parse_catalog(text)
    logger.info("Loaded %d log codes from %s", len(catalog), path)
    return catalog


def catalog_path_from_env(environ=None) -> str:
    """Return the catalog path named by LOG_CODES_YAML."""
    if environ is None:
        environ = os.environ
    path = (environ.get(CATALOG_ENV_VAR) or "").strip()
    if not path:
        raise CatalogError(f"environment variable {CATALOG_ENV_VAR} not set")
    return path
