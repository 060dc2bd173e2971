"""Settings, front-matter overrides, and effective-config resolution."""

from .frontmatter import (
    FRONTMATTER_KEY,
    DocumentMetadataProvider,
    FrontmatterMetadata,
    StaticMetadata,
    coerce_override,
    extract_frontmatter,
)
from .resolver import (
    DISABLE_MARKER,
    ENABLE_MARKER,
    ConfigSource,
    EffectiveConfig,
    find_list_marker,
    resolve_effective_config,
)
from .settings import SettingsStore, SortSettings, load_settings

__all__ = [
    "DISABLE_MARKER",
    "ENABLE_MARKER",
    "FRONTMATTER_KEY",
    "ConfigSource",
    "DocumentMetadataProvider",
    "EffectiveConfig",
    "FrontmatterMetadata",
    "SettingsStore",
    "SortSettings",
    "StaticMetadata",
    "coerce_override",
    "extract_frontmatter",
    "find_list_marker",
    "load_settings",
    "resolve_effective_config",
]
