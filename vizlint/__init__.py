from importlib.metadata import version, PackageNotFoundError

from .cleanup import cleanup
from .dimensions import is_valid_dimension
from .exceptions import (
    CleanupFailed,
    ExtractionFailed,
    InvalidExtractedPath,
    MetadataParseError,
    MetadataReadError,
    MissingMetadata,
    PackageNotFound,
    PathNotSupplied,
    SettingsError,
    VizlintError,
)
from .linter import LINT_COMPLETE_MESSAGE, LintReport, lint
from .metadata import METADATA_FILENAME, load_metadata
from .pipeline import lint_package
from .resolver import ResolvedPackage, load, resolve
from .rules import DEFAULT_RULES, Rule, RuleOutcome, make_dimension_rule
from .settings import VizlintSettings, load_settings

try:
    __version__ = version("vizlint")
except PackageNotFoundError:
    # Package is not installed (e.g. during local development)
    __version__ = "0.1.0-local"

__all__ = [
    "load",
    "resolve",
    "lint",
    "cleanup",
    "lint_package",
    "load_metadata",
    "is_valid_dimension",
    "make_dimension_rule",
    "DEFAULT_RULES",
    "LINT_COMPLETE_MESSAGE",
    "METADATA_FILENAME",
    "LintReport",
    "ResolvedPackage",
    "Rule",
    "RuleOutcome",
    "VizlintSettings",
    "load_settings",
    "VizlintError",
    "PathNotSupplied",
    "PackageNotFound",
    "MissingMetadata",
    "ExtractionFailed",
    "MetadataReadError",
    "MetadataParseError",
    "InvalidExtractedPath",
    "CleanupFailed",
    "SettingsError",
    "__version__",
]
