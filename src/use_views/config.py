import os
import tomllib

# -----------------------------------------------------------------------------
# Tool config (from config.toml)
# -----------------------------------------------------------------------------
script_dir = os.path.dirname(os.path.abspath(__file__))
config_path = os.path.join(script_dir, "config.toml")
with open(config_path, "rb") as f:
    config = tomllib.load(f)

TOOL_NAME = config['tool_name']
REQUEST_TIMEOUT = float(config.get('request_timeout', 15.0))
DOCS_URL = config['docs_url']
SYNTAX_DOCS_URL = config['syntax_docs_url']
COMMUNITY_URL = config['community_url']


def registry_url() -> str:
    """Registry base URL; npm's own `npm_config_registry` override wins."""
    url = os.environ.get("npm_config_registry") or config['registry_url']
    return url.rstrip("/")
