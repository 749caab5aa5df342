"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from storefront.application.results import OperationResult


def unwrap(result: OperationResult):
    """Return the result's value or abort the command with its message."""
    if not result.ok:
        raise click.ClickException(f"{result.message} (code {int(result.error)})")
    return result.value


def parse_ids(raw: str) -> list[int]:
    """Parse '1,2,3' into [1, 2, 3]."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid id '{part}'. Expected integers like '1,2,3'.")
    return ids
