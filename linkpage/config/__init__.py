"""Load and validate the inputs of a link page build.

This subpackage fetches the page's JSON document (from disk or over HTTP),
applies the shallow required-section check chosen by
:class:`ValidationPolicy`, and reads the optional ``linkpage.yaml`` build
settings into :class:`BuildSettings`. The primary entry point is
:func:`load_configuration`, which returns the parsed document unmodified or
raises one of the :class:`ConfigError` subclasses.

Examples
--------
>>> from linkpage.config import ValidationPolicy, load_configuration
>>> config = load_configuration(
...     "content/data.json", policy=ValidationPolicy.LENIENT
... )  # doctest: +SKIP
>>> config["profile"]["name"]  # doctest: +SKIP
'Ada Lovelace'
"""

from .loader import load_configuration, validate_configuration
from .models import (
    CONFIG_ERROR_PREFIX,
    BuildSettings,
    ConfigError,
    ConfigFetchError,
    ConfigValidationError,
    LinkPageError,
    SettingsError,
    ValidationPolicy,
)
from .settings import DEFAULT_SETTINGS_PATH, load_build_settings

__all__ = [
    "CONFIG_ERROR_PREFIX",
    "DEFAULT_SETTINGS_PATH",
    "BuildSettings",
    "ConfigError",
    "ConfigFetchError",
    "ConfigValidationError",
    "LinkPageError",
    "SettingsError",
    "ValidationPolicy",
    "load_build_settings",
    "load_configuration",
    "validate_configuration",
]
