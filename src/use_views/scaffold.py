'''
Writes the sample View and the files it needs to run into a project.

Nothing here is rolled back: a failure part way through leaves whatever was
already written in place.
'''

from dataclasses import dataclass, field
from pathlib import Path

from .errors import ScaffoldError
from .project import Platform
from .templates import load_template

APP_IMPORT = "./App"
APP_LOGIC_IMPORT = "./Main/App.view.logic.js"

# create-react-app files the sample View replaces
LEGACY_WEB_FILES = ("App.css", "App.js", "App.test.js", "logo.svg")


@dataclass
class ScaffoldResult:
    written: list = field(default_factory=list)
    removed: list = field(default_factory=list)
    warnings: list = field(default_factory=list)


def ensure_dir(path: Path):
    """mkdir that tolerates an existing directory and nothing else."""
    try:
        path.mkdir()
    except FileExistsError:
        if not path.is_dir():
            raise


def _write(path: Path, content: str, result: ScaffoldResult):
    path.write_text(content, encoding="utf-8")
    result.written.append(path)


def rewrite_web_entry(src_dir: Path, result: ScaffoldResult):
    """Point src/index.js at the Views logic file instead of ./App."""
    index_path = src_dir / "index.js"
    index = index_path.read_text(encoding="utf-8")
    if APP_IMPORT not in index:
        result.warnings.append(
            f"{index_path} does not import {APP_IMPORT}; "
            f"import {APP_LOGIC_IMPORT} there yourself"
        )
        return
    _write(index_path, index.replace(APP_IMPORT, APP_LOGIC_IMPORT, 1), result)


def remove_legacy_files(src_dir: Path, result: ScaffoldResult):
    for name in LEGACY_WEB_FILES:
        path = src_dir / name
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        result.removed.append(path)


def _scaffold_web(project_dir: Path, main_dir: Path, result: ScaffoldResult):
    src_dir = project_dir / "src"
    rewrite_web_entry(src_dir, result)
    remove_legacy_files(src_dir, result)
    _write(src_dir / "index.css", load_template("web", "css"), result)
    _write(main_dir / "App.view.logic.js", load_template("web", "logic"), result)


def _scaffold_native(project_dir: Path, main_dir: Path, result: ScaffoldResult):
    _write(project_dir / "App.js", load_template("native", "entry"), result)
    _write(main_dir / "App.view.logic.js", load_template("native", "logic"), result)
    assets_dir = project_dir / "assets"
    ensure_dir(assets_dir)
    _write(assets_dir / "fonts.js", load_template("native", "fonts"), result)


def append_gitignore(project_dir: Path, result: ScaffoldResult):
    path = project_dir / ".gitignore"
    with open(path, "a", encoding="utf-8") as f:
        f.write(load_template("any", "gitignore"))
    result.written.append(path)


def write_scaffold(project_dir, platform: Platform) -> ScaffoldResult:
    """Write the sample View scaffold for a web or native project."""
    if platform not in (Platform.WEB, Platform.NATIVE):
        raise ValueError(f"cannot scaffold a {platform.value} project")

    project_dir = Path(project_dir)
    result = ScaffoldResult()
    try:
        src_dir = project_dir / "src"
        main_dir = src_dir / "Main"
        ensure_dir(src_dir)
        ensure_dir(main_dir)

        if platform is Platform.WEB:
            _scaffold_web(project_dir, main_dir, result)
        else:
            _scaffold_native(project_dir, main_dir, result)

        append_gitignore(project_dir, result)
        _write(main_dir / "App.view", load_template("any", "view"), result)
    except OSError as e:
        raise ScaffoldError(f"could not write the sample View: {e}") from e
    return result
