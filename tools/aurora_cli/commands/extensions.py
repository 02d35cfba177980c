"""Extension commands.

This module provides all extension-related CLI commands:
- create: Prompt for details and scaffold a new extension directory
- list: Show the extensions under ./extensions
- upload: Validate and package the extension in the working directory
- update: Bump the patch version of an extension
- remove: Delete an extension
- deprecate: Mark an extension as deprecated
- install: Install the extension in the working directory (macOS only)
"""

from __future__ import annotations

import argparse

from aurora_cli import output
from aurora_cli.authoring import (
    deprecate_extension,
    install_extension,
    materialize,
    package_extension,
    resolve_author_info,
    update_extension,
)
from aurora_cli.commands.context import CommandContext
from aurora_cli.config import (
    DEFAULT_LICENSE,
    EDITOR_VERSIONS,
    EXTENSION_CATEGORIES,
    EXTENSION_TYPES,
)
from aurora_cli.models import ExtensionAnswers, build_manifest, is_valid_extension_id
from aurora_cli.prompts import Prompter, required
from aurora_cli.validation import ensure_valid_manifest


def _valid_extension_name(value: str) -> str | None:
    if not value:
        return "Extension name is required."
    if not is_valid_extension_id(value):
        return "Extension name must be a single directory name without slashes."
    return None


def ask_extension_answers(prompter: Prompter) -> ExtensionAnswers:
    """Run the create questionnaire."""
    extension_type = prompter.select("Choose the language for the extension", EXTENSION_TYPES)
    name = prompter.text(
        "Enter the name of the extension",
        validate=_valid_extension_name,
    )
    description = prompter.text(
        "Enter a short description of the extension",
        validate=required("Description is required."),
    )
    categories = prompter.checkbox(
        "Select the categories the extension falls into:",
        EXTENSION_CATEGORIES,
        error="At least one category must be selected.",
    )
    license_name = prompter.text(
        "Enter the license type",
        default=DEFAULT_LICENSE,
        validate=required("License is required."),
    )
    editor_version = prompter.checkbox(
        "Select the supported editor versions:",
        EDITOR_VERSIONS,
        error="At least one editor version must be selected.",
    )
    git_support = prompter.confirm("Do you want to initialize a Git repository?", default=True)
    return ExtensionAnswers(
        type=extension_type,
        name=name,
        description=description,
        categories=tuple(categories),
        editor_version=tuple(editor_version),
        license=license_name,
        git_support=git_support,
    )


def cmd_extension_create(context: CommandContext, _args: argparse.Namespace) -> int:
    """Create a new extension in the working directory.

    Raises:
        ValidationError: If the assembled manifest is invalid (nothing written)
        AlreadyExistsError: If ./<name> already exists
    """
    author = resolve_author_info(context.authors, context.prompter)
    answers = ask_extension_answers(context.prompter)
    manifest = build_manifest(answers, author)

    ensure_valid_manifest(manifest.to_dict())
    output.success("Extension manifest is valid.")

    dest = materialize(
        manifest,
        answers,
        cwd=context.paths.cwd,
        templates_root=context.paths.templates_root,
    )
    output.success(f'Extension "{manifest.name}" created successfully at {dest}.')
    return 0


def cmd_extension_list(context: CommandContext, _args: argparse.Namespace) -> int:
    """List the extensions under ./extensions, numbered from 1.

    Raises:
        NotFoundError: If there is no extensions directory
    """
    entries = context.extensions.list_entries()
    if not entries:
        output.notice("No extensions found.")
        return 0

    output.success("Created extensions:")
    for index, entry in enumerate(entries, start=1):
        line = f"{index}. {entry.extension_id}"
        if entry.manifest is not None:
            version = entry.manifest.get("version", "?")
            kind = entry.manifest.get("type", "?")
            line += f" ({version}, {kind})"
            if entry.manifest.get("deprecated") is True:
                line += " [deprecated]"
        output.info(line)
    return 0


def cmd_extension_upload(context: CommandContext, _args: argparse.Namespace) -> int:
    """Validate the extension in the working directory and package it for upload."""
    output.success("Uploading extension...")
    archive = package_extension(context.paths.cwd, context.paths.dist_dir)
    output.success(f"Extension packaged at {archive}.")
    output.notice("No extension registry is configured; submit the archive manually.")
    return 0


def cmd_extension_update(context: CommandContext, args: argparse.Namespace) -> int:
    """Bump the patch version of extensions/<id>."""
    output.success(f"Updating extension with ID: {args.update}")
    manifest = update_extension(context.extensions, args.update)
    output.success(f"Extension with ID {args.update} is now at version {manifest['version']}.")
    return 0


def cmd_extension_remove(context: CommandContext, args: argparse.Namespace) -> int:
    """Delete extensions/<id>.

    Raises:
        NotFoundError: If the extension does not exist
    """
    context.extensions.remove(args.remove)
    output.success(f"Extension with ID {args.remove} has been removed.")
    return 0


def cmd_extension_deprecate(context: CommandContext, args: argparse.Namespace) -> int:
    """Mark extensions/<id> as deprecated."""
    output.notice(f"Deprecating extension with ID: {args.deprecate}")
    deprecate_extension(context.extensions, args.deprecate)
    output.success(f"Extension with ID {args.deprecate} has been deprecated.")
    return 0


def cmd_extension_install(context: CommandContext, _args: argparse.Namespace) -> int:
    """Install the extension in the working directory into the editor.

    Raises:
        PlatformUnsupportedError: If not on macOS
        NotFoundError: If ./extension.json is missing
        ValidationError: If the manifest is invalid
    """
    install_path = install_extension(
        context.paths.cwd,
        install_root=context.paths.install_root,
    )
    name = install_path.stem
    output.success(f'Extension "{name}" installed successfully to {install_path}.')
    return 0
