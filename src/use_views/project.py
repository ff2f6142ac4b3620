'''
package.json handling: reading, classifying and rewriting a React project
so it runs the Views compiler alongside its own dev server.
'''

import copy
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ManifestError, Stage

MANIFEST_NAME = "package.json"

WEB_MARKER = "react-dom"
NATIVE_MARKER = "react-native"
VIEWS_MARKER = "@viewstools/morph"

START_SCRIPT = "concurrently --names 'react,views' --handle-input npm:dev npm:views"
VIEWS_SCRIPT = "views-morph src --watch --as {target}"
PREBUILD_SCRIPT = "views-morph src --as react-dom"

# top-level keys that must hold objects when present
SECTIONS = ("dependencies", "devDependencies", "scripts")


class Platform(Enum):
    WEB = "web"
    NATIVE = "native"
    UNSUPPORTED = "unsupported"
    MIGRATED = "migrated"

    @property
    def target(self):
        """The `--as` value views-morph compiles for."""
        return WEB_MARKER if self is Platform.WEB else NATIVE_MARKER


@dataclass(frozen=True)
class Manifest:
    path: Path
    data: dict = field(default_factory=dict)

    def section(self, key) -> dict:
        value = self.data.get(key)
        return value if isinstance(value, dict) else {}

    @property
    def dependencies(self) -> dict:
        return self.section("dependencies")

    @property
    def dev_dependencies(self) -> dict:
        return self.section("devDependencies")

    @property
    def scripts(self) -> dict:
        return self.section("scripts")

    @property
    def is_web(self) -> bool:
        return WEB_MARKER in self.dependencies


def read_manifest(project_dir) -> Manifest | None:
    """Load package.json from project_dir, or None if there isn't one."""
    path = Path(project_dir) / MANIFEST_NAME
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ManifestError(f"could not read {path}: {e}", stage=Stage.CLASSIFICATION) from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path} is not a JSON object", stage=Stage.CLASSIFICATION)
    for key in SECTIONS:
        if key in data and not isinstance(data[key], dict):
            raise ManifestError(f"\"{key}\" in {path} is not an object", stage=Stage.CLASSIFICATION)
    return Manifest(path=path, data=data)


def classify(manifest: Manifest | None) -> Platform:
    if manifest is None:
        return Platform.UNSUPPORTED
    # checked before the platform markers
    if VIEWS_MARKER in manifest.dev_dependencies:
        return Platform.MIGRATED
    if WEB_MARKER in manifest.dependencies:
        return Platform.WEB
    if NATIVE_MARKER in manifest.dependencies:
        return Platform.NATIVE
    return Platform.UNSUPPORTED


def packages_for(platform: Platform):
    """Return (dependencies, devDependencies) package names to add."""
    if platform not in (Platform.WEB, Platform.NATIVE):
        raise ValueError(f"nothing to add for a {platform.value} project")
    dev = [VIEWS_MARKER, "concurrently"]
    deps = ["emotion"] if platform is Platform.WEB else []
    return deps, dev


def _writable_section(data, key) -> dict:
    section = data.setdefault(key, {})
    if not isinstance(section, dict):
        raise ManifestError(f"\"{key}\" is not an object")
    return section


def add_views(manifest: Manifest, platform: Platform, versions: dict) -> Manifest:
    """Return a new Manifest with the Views packages and scripts added.

    `versions` maps every name from packages_for(platform) to its latest
    version; each is added as a caret range.
    """
    deps_names, dev_names = packages_for(platform)
    data = copy.deepcopy(manifest.data)

    dependencies = _writable_section(data, "dependencies")
    dev_dependencies = _writable_section(data, "devDependencies")
    for name in deps_names:
        dependencies[name] = f"^{versions[name]}"
    for name in dev_names:
        dev_dependencies[name] = f"^{versions[name]}"

    scripts = _writable_section(data, "scripts")
    original_start = scripts.get("start")
    if original_start is not None:
        scripts["dev"] = original_start
    scripts["start"] = START_SCRIPT
    scripts["views"] = VIEWS_SCRIPT.format(target=platform.target)
    if platform is Platform.WEB:
        scripts["prebuild"] = PREBUILD_SCRIPT

    return Manifest(path=manifest.path, data=data)


def dump_manifest(manifest: Manifest) -> str:
    return json.dumps(manifest.data, indent=2, ensure_ascii=False) + "\n"


def write_manifest(manifest: Manifest):
    """Overwrite package.json with the manifest in full."""
    try:
        manifest.path.write_text(dump_manifest(manifest), encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"could not write {manifest.path}: {e}") from e
