"""Author identity resolution for new manifests."""

from __future__ import annotations

import logging

from aurora_cli import output
from aurora_cli.config import EMAIL_REGEX
from aurora_cli.models.author import AuthorInfo
from aurora_cli.persistence.repositories import AuthorRepository
from aurora_cli.prompts import Prompter, required

logger = logging.getLogger(__name__)


def _valid_email(value: str) -> str | None:
    if not value or EMAIL_REGEX.fullmatch(value):
        return None
    return "Please enter a valid email address."


def _ask(prompter: Prompter, field_name: str) -> str:
    if field_name == "name":
        return prompter.text("Enter the author name", validate=required("Author name is required."))
    if field_name == "email":
        return prompter.text("Enter the author email (optional)", default="", validate=_valid_email)
    return prompter.text("Enter the author company (optional)", default="")


def resolve_author_info(repository: AuthorRepository, prompter: Prompter) -> AuthorInfo:
    """Load the author record and prompt for whatever is missing.

    Steps:
    1. Load from the repository (missing or corrupt files give an empty record)
    2. Ask for name, email and company when absent
    3. If anything was asked, offer once to save the merged record

    A fully populated record is returned as-is without any prompt. The
    website field is carried through but never asked for here.
    """
    author = repository.load()
    missing = author.missing_fields()
    if not missing:
        return author

    answers = {field_name: _ask(prompter, field_name) for field_name in missing}
    author = author.merged_with(answers)

    if prompter.confirm(
        "Would you like to save this author information for future use?",
        default=True,
    ):
        try:
            repository.save(author)
        except OSError as exc:
            logger.error("Error saving author information: %s", exc)
        else:
            output.success(f"Author information saved to {repository.path}")
    return author
