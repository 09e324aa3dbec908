"""HTTP download of component sources."""

from pathlib import Path

import httpx

from zeno.exceptions import ComponentNotFoundError, FetchError


def _remove_partial(path: Path) -> None:
    """Delete a partially written download, if any."""
    path.unlink(missing_ok=True)


def _stream_to_file(client: httpx.Client, url: str, name: str, destination: Path) -> None:
    with client.stream("GET", url) as response:
        if response.status_code != 200:
            raise ComponentNotFoundError(f"Component '{name}' not found at {url}")
        with open(destination, "wb") as f:
            for chunk in response.iter_bytes():
                f.write(chunk)


def fetch_component(
    url: str,
    name: str,
    destination: Path,
    client: httpx.Client | None = None,
) -> Path:
    """Download a component source and write it verbatim to destination.

    The destination directory is created if needed. On any failure the
    partially written file is removed before the error is raised.

    Args:
        url: Raw file URL of the component
        name: Component name, used in error messages
        destination: Local file to write
        client: Optional httpx client (a default one is created otherwise)

    Returns:
        The destination path

    Raises:
        ComponentNotFoundError: If the server answers with anything but 200
        FetchError: On connection-level errors
    """
    destination.parent.mkdir(parents=True, exist_ok=True)

    try:
        if client is None:
            with httpx.Client(follow_redirects=True, timeout=None) as default_client:
                _stream_to_file(default_client, url, name, destination)
        else:
            _stream_to_file(client, url, name, destination)
    except ComponentNotFoundError:
        _remove_partial(destination)
        raise
    except httpx.RequestError as e:
        _remove_partial(destination)
        raise FetchError(f"Network error while fetching '{name}': {e}")

    return destination
