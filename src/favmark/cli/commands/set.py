# topmark:header:start
#
#   project      : FavMark
#   file         : set.py
#   file_relpath : src/favmark/cli/commands/set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `set` command.

Flow:
    1. Detect the project in ``--dir``; if none, scan the current folder,
       direct sub-folders, ``apps/*`` and ``packages/*`` and let the user pick.
    2. Use IMAGE, or pick one of the images found in the project (or enter a
       path manually).
    3. Generate the favicon files into the public directory (or
       ``generate.output_dir``).
    4. Inject the references into the project sources, unless ``--no-inject``
       or ``inject.enabled = false``.

A failed injection is reported as a warning; the generated files are still
usable with manually added references.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from favmark.assets.errors import ImageReadError, UnsupportedImageError
from favmark.assets.generate import generate_favicons, validate_source_image
from favmark.cli.cmd_common import (
    choose_image,
    get_effective_verbosity,
    load_config,
    report_injection,
    resolve_project_dir,
    select_project,
)
from favmark.cli.errors import (
    FavmarkFileNotFoundError,
    FavmarkIOError,
    FavmarkUnsupportedImageError,
)
from favmark.cli.options import common_config_options, dry_run_option, project_dir_option
from favmark.config.logging import get_logger
from favmark.constants import GENERATED_FILES, SUPPORTED_IMAGE_EXTENSIONS
from favmark.inject.dispatcher import run_injection
from favmark.utils.file import display_path

if TYPE_CHECKING:
    from favmark.cli_shared.console_api import ConsoleLike
    from favmark.config.model import Config
    from favmark.project.profile import ProjectProfile

logger = get_logger(__name__)


def resolve_image_argument(image: str, project_root: Path) -> Path:
    """Resolve IMAGE against the project root, then the current directory."""
    candidate = Path(image).expanduser()
    if candidate.is_absolute():
        return candidate
    in_project = project_root / candidate
    if in_project.exists() or not candidate.exists():
        return in_project
    return candidate.resolve()


def _validated_image(path: Path) -> Path:
    try:
        return validate_source_image(path)
    except FileNotFoundError as e:
        raise FavmarkFileNotFoundError(f"Image not found: {path}") from e
    except UnsupportedImageError as e:
        supported = ", ".join(sorted(SUPPORTED_IMAGE_EXTENSIONS))
        raise FavmarkUnsupportedImageError(f"{e} Supported: {supported}") from e


def _generate(ctx: click.Context, image: Path, output_dir: Path, config: Config) -> None:
    console: ConsoleLike = ctx.obj["console"]
    try:
        results = generate_favicons(image, output_dir, config.manifest_settings())
    except (UnsupportedImageError, ImageReadError) as e:
        raise FavmarkUnsupportedImageError(str(e)) from e
    except OSError as e:
        raise FavmarkIOError(f"Failed to generate favicons: {e}") from e

    console.print(f"Generated {console.styled(str(len(results)), fg='green')} files")
    console.print()
    console.print(console.styled("Generated Files", bold=True, fg="cyan"))
    for asset in results:
        ok = console.styled("[OK]", fg="green")
        console.print(f"  {ok} {asset.name} {console.styled(f'({asset.label})', dim=True)}")


def _inject(ctx: click.Context, profile: ProjectProfile, config: Config, *, dry_run: bool) -> None:
    console: ConsoleLike = ctx.obj["console"]
    root = profile.details.root if profile.details else Path.cwd()
    try:
        result = run_injection(profile, config.references(), apply=not dry_run)
    except OSError as e:
        logger.error("Injection failed: %s", e)
        console.warn(f"[WARN] Auto-inject warning: {e}")
        return

    report_injection(ctx, result, root)
    if result.succeeded:
        console.print(console.styled("Favicon references injected", fg="green"))
    else:
        console.warn("[WARN] Could not auto-inject. Add references manually.")


@click.command(
    name="set",
    help="Set a favicon from an image file: generate the icon set and inject references.",
)
@click.argument("image", required=False)
@project_dir_option
@click.option(
    "--no-inject",
    "no_inject",
    is_flag=True,
    help="Skip auto-injecting into project files.",
)
@dry_run_option
@common_config_options
def set_command(
    *,
    image: str | None,
    project_dir: Path,
    no_inject: bool,
    dry_run: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Generate favicons from IMAGE and wire them into the project."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    base_dir = resolve_project_dir(project_dir)
    profile = select_project(ctx, base_dir)
    details = profile.details
    project_root = details.root if details else base_dir
    config = load_config(project_root, config_paths, no_config=no_config)
    if no_inject:
        # Command-line override applied after config discovery
        draft = config.thaw()
        draft.inject_enabled = False
        config = draft.freeze()

    image_path = (
        resolve_image_argument(image, project_root) if image else choose_image(project_root)
    )
    image_path = _validated_image(image_path)
    if vlevel >= 0:
        console.print(console.styled(f"Using image: {image_path}", dim=True))

    output_dir = config.output_dir or (details.public_dir if details else project_root / "public")
    if dry_run:
        console.print(f"Would write {len(GENERATED_FILES)} files to {output_dir}:")
        for name in GENERATED_FILES:
            console.print(f"  {name}")
    else:
        _generate(ctx, image_path, output_dir, config)

    if not config.inject_enabled:
        logger.info("Injection skipped (no_inject=%s)", no_inject)
    else:
        _inject(ctx, profile, config, dry_run=dry_run)

    if dry_run:
        return
    console.print()
    console.print(console.styled("Favicons set successfully", bold=True, fg="green"))
    if vlevel >= 0:
        where = display_path(output_dir, project_root)
        console.print(console.styled(f"Files written to {where}.", dim=True))
        console.print(console.styled("Restart your dev server to see the changes.", dim=True))
