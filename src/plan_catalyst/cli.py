# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for inspecting catalysts and plan manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .errors import CatalystError
from .facets import FACET_CATEGORIES, FacetCategory
from .loader import CatalystLoader
from .logging import emit_warnings, fail, info, ok, section
from .merger import merge_catalysts
from .options import LoaderOptions
from .plan_manifest import (
    add_catalyst_to_manifest,
    read_plan_manifest,
    remove_catalyst_from_manifest,
)
from .render import render_facet, summarize_merge

app = typer.Typer(
    name="plan-catalyst",
    help="Load, merge, and render catalyst guidance packages.",
    no_args_is_help=True,
    add_completion=False,
)
plan_app = typer.Typer(name="plan", help="Inspect and edit plan.yaml manifests.", no_args_is_help=True)
app.add_typer(plan_app, name="plan")

StrictOption = Annotated[bool, typer.Option("--strict", help="Do not display facet warnings.")]
WarnMissingOption = Annotated[
    bool,
    typer.Option("--warn-missing", help="Warn about facets declared true without markdown files."),
]
WarnUndeclaredOption = Annotated[
    bool,
    typer.Option("--warn-undeclared", help="Warn about facets declared false that still ship files."),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate status lines with emoji.")]


def _build_options(strict: bool, warn_missing: bool, warn_undeclared: bool) -> LoaderOptions:
    """Translate CLI flags into loader options.

    Args:
        strict: Suppress display of load warnings.
        warn_missing: Opt in to warnings for declared facets without markdown files.
        warn_undeclared: Opt in to warnings for facets declared false that ship files.

    Returns:
        LoaderOptions: Frozen options shared by every catalyst loaded by the command.
    """

    return LoaderOptions(
        strict=strict,
        warn_on_missing_facets=warn_missing,
        warn_on_undeclared_facets=warn_undeclared,
    )


def _parse_facet(raw: str | None) -> FacetCategory | None:
    """Return the facet named by ``--facet``, or ``None`` when the option is absent.

    Raises:
        typer.BadParameter: If ``raw`` names no known facet.
    """

    if raw is None:
        return None
    try:
        return FacetCategory.from_raw(raw)
    except ValueError as exc:
        choices = ", ".join(category.value for category in FACET_CATEGORIES)
        raise typer.BadParameter(f"{exc}; choose one of: {choices}") from exc


@app.command("show")
def show_catalyst(
    path: Annotated[Path, typer.Argument(help="Catalyst directory.")],
    strict: StrictOption = False,
    warn_missing: WarnMissingOption = False,
    warn_undeclared: WarnUndeclaredOption = False,
    use_emoji: EmojiOption = False,
) -> None:
    """Load one catalyst and print its identity and facet file counts.

    Raises:
        typer.Exit: With code 1 when the catalyst cannot be loaded.
    """

    options = _build_options(strict, warn_missing, warn_undeclared)
    try:
        catalyst = CatalystLoader(options=options).load(path)
    except CatalystError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc

    manifest = catalyst.manifest
    ok(f"{manifest.name} ({manifest.id}@{manifest.version})", use_emoji=use_emoji)
    typer.echo(manifest.description)
    typer.echo(f"Directory: {catalyst.directory_path}")
    for category in FACET_CATEGORIES:
        files = catalyst.facet(category)
        if files:
            names = ", ".join(item.filename for item in files)
            typer.echo(f"  {category.label}: {len(files)} file(s) [{names}]")
    emit_warnings(catalyst.warnings, options, use_emoji=use_emoji)


@app.command("merge")
def merge_command(
    paths: Annotated[list[str], typer.Argument(help="Catalyst directories, base layer first.")],
    base: Annotated[
        Path | None,
        typer.Option("--base", help="Directory used to resolve relative catalyst paths."),
    ] = None,
    facet: Annotated[
        str | None,
        typer.Option("--facet", help="Render one facet instead of printing the summary."),
    ] = None,
    strict: StrictOption = False,
    warn_missing: WarnMissingOption = False,
    warn_undeclared: WarnUndeclaredOption = False,
    use_emoji: EmojiOption = False,
) -> None:
    """Merge catalysts in order and print a summary or one rendered facet.

    Raises:
        typer.Exit: With code 1 when any catalyst fails to load.
    """

    category = _parse_facet(facet)
    options = _build_options(strict, warn_missing, warn_undeclared)
    try:
        catalysts = CatalystLoader(base_path=base, options=options).resolve(paths)
    except CatalystError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc

    for catalyst in catalysts:
        emit_warnings(catalyst.warnings, options, use_emoji=use_emoji)
    merged = merge_catalysts(catalysts)
    if category is None:
        typer.echo(summarize_merge(merged))
        return
    rendered = render_facet(merged, category)
    if not rendered:
        info(f"No {category.label.lower()} content in the merged catalysts", use_emoji=use_emoji)
        return
    section(category.label, use_color=False)
    typer.echo(rendered)


@plan_app.command("show")
def plan_show(
    plan_directory: Annotated[Path, typer.Argument(help="Plan directory holding plan.yaml.")],
    use_emoji: EmojiOption = False,
) -> None:
    """Print the plan manifest.

    Raises:
        typer.Exit: With code 1 when the manifest is invalid.
    """

    try:
        manifest = read_plan_manifest(plan_directory)
    except CatalystError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc
    if manifest is None:
        info(f"No plan manifest in {plan_directory}", use_emoji=use_emoji)
        return
    typer.echo(f"{manifest.title} ({manifest.id})")
    if manifest.created:
        typer.echo(f"Created: {manifest.created}")
    if manifest.catalysts:
        typer.echo("Catalysts:")
        for position, catalyst_id in enumerate(manifest.catalysts, start=1):
            typer.echo(f"  {position}. {catalyst_id}")
    else:
        typer.echo("Catalysts: none")


@plan_app.command("add")
def plan_add(
    plan_directory: Annotated[Path, typer.Argument(help="Plan directory holding plan.yaml.")],
    catalyst_id: Annotated[str, typer.Argument(help="Catalyst identifier to append.")],
    use_emoji: EmojiOption = False,
) -> None:
    """Append a catalyst to the plan manifest.

    Raises:
        typer.Exit: With code 1 when the manifest cannot be updated.
    """

    try:
        manifest = add_catalyst_to_manifest(plan_directory, catalyst_id)
    except CatalystError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc
    ok(f"{manifest.id}: {', '.join(manifest.catalysts or ())}", use_emoji=use_emoji)


@plan_app.command("remove")
def plan_remove(
    plan_directory: Annotated[Path, typer.Argument(help="Plan directory holding plan.yaml.")],
    catalyst_id: Annotated[str, typer.Argument(help="Catalyst identifier to remove.")],
    use_emoji: EmojiOption = False,
) -> None:
    """Remove a catalyst from the plan manifest.

    Raises:
        typer.Exit: With code 1 when the manifest cannot be updated.
    """

    try:
        manifest = remove_catalyst_from_manifest(plan_directory, catalyst_id)
    except CatalystError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc
    if manifest is None:
        info(f"No plan manifest in {plan_directory}", use_emoji=use_emoji)
        return
    remaining = ", ".join(manifest.catalysts or ()) or "none"
    ok(f"{manifest.id}: {remaining}", use_emoji=use_emoji)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
