"""Web server command."""

import subprocess
import sys
from pathlib import Path

import rich_click as click

from ..config import get_settings
from ._console import console


@click.command()
@click.option("--host", "-h", default=None, help="Host to bind to")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to")
@click.option("--reload/--no-reload", default=False, help="Auto-reload on code changes")
def web(host: str | None, port: int | None, reload: bool):
    """Start the extraction API server."""
    settings = get_settings().web
    if host is None:
        host = settings.host
    if port is None:
        port = settings.port
    project_dir = Path(__file__).parent.parent.parent

    console.print(f"Starting nostrscan API at http://{host}:{port}")
    console.print("Press Ctrl+C to stop")

    cmd = [
        "uv",
        "run",
        "--project",
        str(project_dir),
        "--with",
        "uvicorn[standard]",
        "uvicorn",
        "nostrscan.web:create_app",
        "--host",
        host,
        "--port",
        str(port),
        "--factory",
    ]
    if reload:
        cmd.append("--reload")

    try:
        subprocess.run(cmd, check=True)
    except FileNotFoundError:
        console.print("[red]Error: 'uv' not found. Install with: curl -LsSf https://astral.sh/uv/install.sh | sh[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        pass
