'''
Latest-version lookups against the npm registry.
'''

import asyncio
from urllib.parse import quote

import httpx

from . import config
from .errors import ResolutionError


def latest_path(name: str) -> str:
    # scoped packages keep their "@" but the "/" must be encoded
    return f"/{quote(name, safe='@')}/latest"


async def fetch_latest_version(client: httpx.AsyncClient, name: str) -> str:
    try:
        response = await client.get(latest_path(name))
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        raise ResolutionError(
            f"registry returned {e.response.status_code} for {name}", package=name
        ) from e
    except httpx.HTTPError as e:
        raise ResolutionError(f"could not reach the registry for {name}: {e}", package=name) from e
    except ValueError as e:
        raise ResolutionError(f"registry sent invalid JSON for {name}", package=name) from e

    version = payload.get("version") if isinstance(payload, dict) else None
    if not isinstance(version, str) or not version:
        raise ResolutionError(f"registry response for {name} has no version", package=name)
    return version


async def resolve_versions(names, registry_url=None, transport=None) -> dict:
    """Look up the latest version of every package in `names` concurrently.

    All lookups must succeed; the first failure propagates as a
    ResolutionError and nothing is returned.
    """
    names = list(names)
    client_kwargs = {
        "base_url": registry_url or config.registry_url(),
        "timeout": config.REQUEST_TIMEOUT,
        "headers": {"Accept": "application/json"},
    }
    if transport is not None:
        client_kwargs["transport"] = transport

    async with httpx.AsyncClient(**client_kwargs) as client:
        try:
            # a failing lookup cancels the rest before the client closes
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(fetch_latest_version(client, n)) for n in names]
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from eg.exceptions[0].__cause__
    return {name: task.result() for name, task in zip(names, tasks)}
