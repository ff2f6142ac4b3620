# Scaffold files written into a project. Contents are fixed; nothing is
# substituted into them.
import importlib.resources

ANY = "any"

TEMPLATES = {
    (ANY, "view"): "App.view",
    (ANY, "gitignore"): "gitignore.txt",
    ("web", "logic"): "App.view.logic.web.js",
    ("web", "css"): "index.css",
    ("native", "logic"): "App.view.logic.native.js",
    ("native", "entry"): "App.native.js",
    ("native", "fonts"): "fonts.native.js",
}


def template_name(platform: str, role: str) -> str:
    """File name for (platform, role), falling back to the shared template."""
    try:
        return TEMPLATES[(platform, role)]
    except KeyError:
        pass
    try:
        return TEMPLATES[(ANY, role)]
    except KeyError:
        raise KeyError(f"no {role!r} template for {platform!r}") from None


def load_template(platform: str, role: str) -> str:
    resource = importlib.resources.files(__name__) / template_name(platform, role)
    return resource.read_text(encoding="utf-8")
