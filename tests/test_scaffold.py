import pytest

from use_views.errors import ScaffoldError
from use_views.project import Platform
from use_views.scaffold import ensure_dir, write_scaffold
from use_views.templates import TEMPLATES, load_template, template_name


def test_every_template_loads():
    for platform, role in TEMPLATES:
        assert load_template(platform, role).strip()


def test_template_name_falls_back_to_shared():
    assert template_name("web", "view") == "App.view"
    assert template_name("native", "logic") == "App.view.logic.native.js"
    with pytest.raises(KeyError):
        template_name("web", "fonts")


def test_web_scaffold(web_project):
    result = write_scaffold(web_project, Platform.WEB)
    src = web_project / "src"

    index = (src / "index.js").read_text(encoding="utf-8")
    assert "import App from './Main/App.view.logic.js'" in index
    for name in ("App.css", "App.js", "App.test.js", "logo.svg"):
        assert not (src / name).exists()
    assert len(result.removed) == 4

    assert (src / "index.css").read_text(encoding="utf-8").startswith("* {")
    assert "./App.view.js" in (src / "Main" / "App.view.logic.js").read_text(encoding="utf-8")
    assert (src / "Main" / "App.view").read_text(encoding="utf-8").startswith("App Vertical")
    assert "**/*.view.js" in (web_project / ".gitignore").read_text(encoding="utf-8")
    assert not (web_project / "App.js").exists()
    assert result.warnings == []


def test_native_scaffold(native_project):
    write_scaffold(native_project, Platform.NATIVE)
    assert "src/Main/App.view.logic.js" in (native_project / "App.js").read_text(encoding="utf-8")
    logic = (native_project / "src" / "Main" / "App.view.logic.js").read_text(encoding="utf-8")
    assert "Font.loadAsync(fonts)" in logic
    assert (native_project / "assets" / "fonts.js").read_text(encoding="utf-8").startswith("export default {")
    assert (native_project / "src" / "Main" / "App.view").exists()
    assert not (native_project / "src" / "index.css").exists()


def test_native_scaffold_creates_assets(tmp_path):
    write_scaffold(tmp_path, Platform.NATIVE)
    assert (tmp_path / "assets" / "fonts.js").exists()


def test_gitignore_is_appended(native_project):
    (native_project / ".gitignore").write_text("node_modules/\n", encoding="utf-8")
    write_scaffold(native_project, Platform.NATIVE)
    content = (native_project / ".gitignore").read_text(encoding="utf-8")
    assert content.startswith("node_modules/\n")
    assert content.endswith("**/Fonts/*.js\n")


def test_web_scaffold_twice_tolerates_existing_state(web_project):
    write_scaffold(web_project, Platform.WEB)
    result = write_scaffold(web_project, Platform.WEB)

    # directories exist and legacy files are gone; neither is an error
    assert result.removed == []
    assert len(result.warnings) == 1
    assert "./App" in result.warnings[0]
    index = (web_project / "src" / "index.js").read_text(encoding="utf-8")
    assert index.count("./Main/App.view.logic.js") == 1


def test_web_scaffold_without_app_import_warns(web_project):
    (web_project / "src" / "index.js").write_text("import Root from './Root'\n", encoding="utf-8")
    result = write_scaffold(web_project, Platform.WEB)
    assert result.warnings
    assert (web_project / "src" / "index.js").read_text(encoding="utf-8") == "import Root from './Root'\n"


def test_web_scaffold_without_index_fails(tmp_path):
    with pytest.raises(ScaffoldError):
        write_scaffold(tmp_path, Platform.WEB)


def test_ensure_dir_tolerates_existing(tmp_path):
    ensure_dir(tmp_path / "src")
    ensure_dir(tmp_path / "src")
    assert (tmp_path / "src").is_dir()


def test_ensure_dir_rejects_file(tmp_path):
    (tmp_path / "src").write_text("", encoding="utf-8")
    with pytest.raises(FileExistsError):
        ensure_dir(tmp_path / "src")


def test_scaffold_src_is_a_file(tmp_path):
    (tmp_path / "src").write_text("", encoding="utf-8")
    with pytest.raises(ScaffoldError):
        write_scaffold(tmp_path, Platform.NATIVE)


def test_scaffold_rejects_migrated():
    with pytest.raises(ValueError):
        write_scaffold(".", Platform.MIGRATED)
