'''
The use-views run: classify -> resolve -> mutate -> install -> scaffold -> help.

Each stage takes the previous stage's value and returns a new one; the
Manifest is never modified in place.
'''

from dataclasses import dataclass
from pathlib import Path

from . import messages
from .installer import install, uses_yarn
from .project import Manifest, Platform, add_views, classify, packages_for, read_manifest, write_manifest
from .registry import resolve_versions
from .scaffold import ScaffoldResult, write_scaffold


@dataclass(frozen=True)
class PipelineResult:
    platform: Platform
    completed: bool
    manifest: Manifest | None = None
    scaffold: ScaffoldResult | None = None


async def resolve_for(platform: Platform, transport=None) -> dict:
    deps, dev = packages_for(platform)
    return await resolve_versions(deps + dev, transport=transport)


async def run_pipeline(project_dir, *, transport=None, installer=install) -> PipelineResult:
    """Turn the React project in project_dir into a Views project.

    Returns early (completed=False) without writing anything when the
    directory is unsupported or already uses Views. Stage failures raise
    the matching ViewsError subclass.
    """
    project_dir = Path(project_dir)

    manifest = read_manifest(project_dir)
    platform = classify(manifest)

    if platform is Platform.UNSUPPORTED:
        messages.print_unsupported(project_dir)
        return PipelineResult(platform=platform, completed=False, manifest=manifest)

    if platform is Platform.MIGRATED:
        messages.print_migrated()
        messages.print_help(manifest.is_web, uses_yarn(project_dir))
        return PipelineResult(platform=platform, completed=False, manifest=manifest)

    messages.print_intro(platform)

    print("Getting the latest versions of Views dependencies...")
    versions = await resolve_for(platform, transport=transport)
    print("✓ " + ", ".join(f"{name}@{version}" for name, version in versions.items()))

    print("Setting up the project...")
    manifest = add_views(manifest, platform, versions)
    write_manifest(manifest)
    print(f"✓ {manifest.path.name} updated")

    print("Installing the dependencies...")
    installer(project_dir)
    print("✓ Dependencies installed")

    print("Preparing a sample View for you to work with...")
    scaffold = write_scaffold(project_dir, platform)
    for warning in scaffold.warnings:
        print(f"Warning: {warning}")
    print("✓ Sample View ready")

    messages.print_done()
    messages.print_help(platform is Platform.WEB, uses_yarn(project_dir))
    return PipelineResult(platform=platform, completed=True, manifest=manifest, scaffold=scaffold)
