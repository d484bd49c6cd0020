# topmark:header:start
#
#   project      : FavMark
#   file         : model.py
#   file_relpath : src/favmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot used by the CLI commands.
    - `MutableConfig`: a mutable builder used while merging defaults and
      ``favmark.toml`` files; it can be frozen into `Config` and thawed back
      to apply command-line overrides.

Merge order (last wins): built-in defaults, the project's ``favmark.toml``,
then every file given with ``--config`` in command-line order.

Path semantics:
    ``generate.output_dir`` is resolved against the directory of the config
    file declaring it. An empty value means "the project's public directory".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from favmark.assets.generate import ManifestSettings
from favmark.config.io import (
    ConfigError,
    discover_config_file,
    get_bool_checked,
    get_string_checked,
    get_table,
    load_defaults_dict,
    load_toml_dict,
    warn_unknown_keys,
)
from favmark.config.keys import Toml
from favmark.config.logging import get_logger
from favmark.inject.references import FaviconReferenceSet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from favmark.config.io import TomlTable
    from favmark.config.logging import FavmarkLogger

logger: FavmarkLogger = get_logger(__name__)

__all__ = ["Config", "ConfigError", "MutableConfig"]


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for FavMark.

    Attributes:
        base_url (str): Prefix for every injected href.
        theme_color (str): Theme color for the meta element and the manifest.
        manifest_name (str): Manifest ``name``.
        manifest_short_name (str): Manifest ``short_name``.
        background_color (str): Manifest ``background_color``.
        display (str): Manifest ``display`` mode.
        output_dir (Path | None): Where assets are written; None means the
            project's public directory.
        inject_enabled (bool): Whether ``set`` edits project sources.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot.
    """

    base_url: str
    theme_color: str
    manifest_name: str
    manifest_short_name: str
    background_color: str
    display: str
    output_dir: Path | None
    inject_enabled: bool
    config_files: tuple[Path | str, ...]

    def references(self) -> FaviconReferenceSet:
        """Return the reference set injected into project sources."""
        return FaviconReferenceSet.build(base_url=self.base_url, theme_color=self.theme_color)

    def manifest_settings(self) -> ManifestSettings:
        """Return the values written to ``site.webmanifest``."""
        return ManifestSettings(
            name=self.manifest_name,
            short_name=self.manifest_short_name,
            theme_color=self.theme_color,
            background_color=self.background_color,
            display=self.display,
            base_url=self.base_url,
        )

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            base_url=self.base_url,
            theme_color=self.theme_color,
            manifest_name=self.manifest_name,
            manifest_short_name=self.manifest_short_name,
            background_color=self.background_color,
            display=self.display,
            output_dir=self.output_dir,
            inject_enabled=self.inject_enabled,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging sources.

    Every scalar is ``None`` until a source sets it; `freeze` fills the gaps
    with the runtime defaults.
    """

    base_url: str | None = None
    theme_color: str | None = None
    manifest_name: str | None = None
    manifest_short_name: str | None = None
    background_color: str | None = None
    display: str | None = None
    output_dir: Path | None = None
    inject_enabled: bool | None = None

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ConfigError: If ``display`` is not a valid manifest display mode.
        """
        defaults = MutableConfig().merge_toml(load_defaults_dict())
        display = self.display if self.display is not None else defaults.display
        if display not in Toml.DISPLAY_MODES:
            allowed = ", ".join(sorted(Toml.DISPLAY_MODES))
            raise ConfigError(
                f"Invalid manifest display mode '{display}' (expected one of: {allowed})"
            )

        def pick(value: str | None, default: str | None) -> str:
            return value if value is not None else (default or "")

        return Config(
            base_url=pick(self.base_url, defaults.base_url) or "/",
            theme_color=pick(self.theme_color, defaults.theme_color),
            manifest_name=pick(self.manifest_name, defaults.manifest_name),
            manifest_short_name=pick(self.manifest_short_name, defaults.manifest_short_name),
            background_color=pick(self.background_color, defaults.background_color),
            display=display,
            output_dir=self.output_dir,
            inject_enabled=self.inject_enabled if self.inject_enabled is not None else True,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft = cls().merge_toml(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a builder from a single ``favmark.toml``.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        draft = cls().merge_toml(load_toml_dict(path), base_dir=path.parent, where=str(path))
        draft.config_files = [path]
        return draft

    def merge_toml(
        self,
        table: TomlTable,
        base_dir: Path | None = None,
        *,
        where: str = "<config>",
    ) -> MutableConfig:
        """Apply the values of a parsed TOML document onto this builder.

        Args:
            table (TomlTable): Parsed configuration.
            base_dir (Path | None): Directory relative paths are resolved against;
                the current directory when None.
            where (str): Source name used in messages.

        Returns:
            MutableConfig: This builder, for chaining.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        warn_unknown_keys(table, where=where)

        def string(section: str, key: str) -> str | None:
            return get_string_checked(get_table(table, section, where=where), key, where=section)

        refs = Toml.SECTION_REFERENCES
        self.base_url = _override(self.base_url, string(refs, Toml.KEY_BASE_URL))
        self.theme_color = _override(self.theme_color, string(refs, Toml.KEY_THEME_COLOR))

        manifest = Toml.SECTION_MANIFEST
        self.manifest_name = _override(self.manifest_name, string(manifest, Toml.KEY_NAME))
        self.manifest_short_name = _override(
            self.manifest_short_name, string(manifest, Toml.KEY_SHORT_NAME)
        )
        self.background_color = _override(
            self.background_color, string(manifest, Toml.KEY_BACKGROUND_COLOR)
        )
        self.display = _override(self.display, string(manifest, Toml.KEY_DISPLAY))

        raw_output = string(Toml.SECTION_GENERATE, Toml.KEY_OUTPUT_DIR)
        if raw_output is not None:
            # Empty string resets to the project's public directory
            self.output_dir = _resolve_dir(raw_output, base_dir) if raw_output else None

        inject = get_table(table, Toml.SECTION_INJECT, where=where)
        enabled = get_bool_checked(inject, Toml.KEY_ENABLED, where=Toml.SECTION_INJECT)
        if enabled is not None:
            self.inject_enabled = enabled
        return self

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            base_url=_override(self.base_url, other.base_url),
            theme_color=_override(self.theme_color, other.theme_color),
            manifest_name=_override(self.manifest_name, other.manifest_name),
            manifest_short_name=_override(self.manifest_short_name, other.manifest_short_name),
            background_color=_override(self.background_color, other.background_color),
            display=_override(self.display, other.display),
            output_dir=other.output_dir if other.output_dir is not None else self.output_dir,
            inject_enabled=other.inject_enabled
            if other.inject_enabled is not None
            else self.inject_enabled,
            config_files=self.config_files + other.config_files,
        )

    @classmethod
    def load_merged(
        cls,
        project_dir: Path,
        extra_config_files: Iterable[Path] | None = None,
        *,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, the project's ``favmark.toml`` and explicit config files.

        Args:
            project_dir (Path): Directory searched for ``favmark.toml``.
            extra_config_files (Iterable[Path] | None): Files merged last, in order.
            no_config (bool): Skip discovery of ``favmark.toml`` in ``project_dir``.

        Returns:
            MutableConfig: The merged builder.

        Raises:
            ConfigError: If any source is unreadable or invalid.
        """
        draft = cls.from_defaults()
        if not no_config:
            local = discover_config_file(project_dir)
            if local is not None:
                draft = draft.merge_with(cls.from_toml_file(local))
        for extra in extra_config_files or ():
            draft = draft.merge_with(cls.from_toml_file(Path(extra)))
        logger.debug("Merged config sources: %s", draft.config_files)
        return draft


def _override(current: str | None, new: str | None) -> str | None:
    return new if new is not None else current


def _resolve_dir(raw: str, base_dir: Path | None) -> Path:
    p = Path(raw).expanduser()
    if p.is_absolute():
        return p.resolve()
    return ((base_dir or Path.cwd()) / p).resolve()
