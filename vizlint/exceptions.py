class VizlintError(Exception):
    """Base error for the vizlint pipeline."""
    code = "E_VIZLINT"

class PathNotSupplied(VizlintError):
    """Raised when no package path was given."""
    code = "E_PATH_NOT_SUPPLIED"

class PackageNotFound(VizlintError):
    """Raised when the package path does not exist on disk."""
    code = "E_PACKAGE_NOT_FOUND"

class MissingMetadata(VizlintError):
    """Raised when a package root has no metadata.json."""
    code = "E_MISSING_METADATA"

class ExtractionFailed(VizlintError):
    """Raised when an archive cannot be opened or unpacked into a scratch directory."""
    code = "E_EXTRACTION_FAILED"

class MetadataReadError(VizlintError):
    """Raised when metadata.json exists but cannot be read."""
    code = "E_METADATA_READ"

class MetadataParseError(VizlintError):
    """Raised when metadata.json is not valid JSON."""
    code = "E_METADATA_PARSE"

class InvalidExtractedPath(VizlintError):
    """Raised when cleanup is asked to remove something that is not an extracted package."""
    code = "E_INVALID_EXTRACTED_PATH"

class CleanupFailed(VizlintError):
    """Raised when an extracted package cannot be removed."""
    code = "E_CLEANUP_FAILED"

class SettingsError(VizlintError):
    """Raised when a settings file is missing or malformed."""
    code = "E_SETTINGS"
