import json

import httpx
import pytest

LATEST = {
    "@viewstools/morph": "24.1.0",
    "concurrently": "8.2.2",
    "emotion": "10.0.27",
}

WEB_INDEX = """import React from 'react'
import ReactDOM from 'react-dom'
import './index.css'
import App from './App'

ReactDOM.render(<App />, document.getElementById('root'))
"""


def write_package_json(project_dir, data):
    (project_dir / "package.json").write_text(json.dumps(data, indent=2), encoding="utf-8")


def registry_transport(latest=LATEST, calls=None):
    """MockTransport answering GET /<name>/latest from `latest`."""

    def handler(request: httpx.Request):
        name = request.url.path[1:].rsplit("/latest", 1)[0].replace("%2F", "/")
        if calls is not None:
            calls.append(name)
        if name not in latest:
            return httpx.Response(404, json={"error": "Not found"})
        return httpx.Response(200, json={"name": name, "version": latest[name]})

    return httpx.MockTransport(handler)


@pytest.fixture
def transport():
    return registry_transport()


@pytest.fixture
def web_project(tmp_path):
    write_package_json(tmp_path, {
        "name": "my-app",
        "dependencies": {"react": "^16.0.0", "react-dom": "^16.0.0"},
        "scripts": {"start": "react-scripts start", "build": "react-scripts build"},
    })
    src = tmp_path / "src"
    src.mkdir()
    (src / "index.js").write_text(WEB_INDEX, encoding="utf-8")
    for name in ("App.css", "App.js", "App.test.js", "logo.svg"):
        (src / name).write_text("legacy", encoding="utf-8")
    return tmp_path


@pytest.fixture
def native_project(tmp_path):
    write_package_json(tmp_path, {
        "name": "my-native-app",
        "dependencies": {"react": "16.8.3", "react-native": "0.59.8", "expo": "^33.0.0"},
        "devDependencies": {"babel-preset-expo": "^5.1.1"},
        "scripts": {"start": "expo start", "ios": "expo start --ios"},
    })
    (tmp_path / "assets").mkdir()
    return tmp_path


@pytest.fixture
def no_install():
    calls = []

    def installer(project_dir):
        calls.append(project_dir)

    installer.calls = calls
    return installer
