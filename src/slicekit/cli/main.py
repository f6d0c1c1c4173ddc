"""
CLI: stat a stored blob or serve blob metadata over HTTP.
Both commands read FileStorage under --root (default: SLICEKIT_STORAGE_ROOT).
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from slicekit.core.app import create_app
from slicekit.core.config import load_config_from_env
from slicekit.core.log import configure_logging
from slicekit.core.request import Request
from slicekit.core.responses import OK, Response
from slicekit.slices.metadata import BlobMetadataSlice
from slicekit.storage.file import FileStorage

logger = logging.getLogger(__name__)

app = typer.Typer(help="slicekit CLI: blob metadata from file storage.")


def _root(root: Optional[Path]) -> Path:
    return root if root is not None else Path(load_config_from_env().storage_root)


async def _stat(storage: FileStorage, path: str) -> Response:
    target = path if path.startswith("/") else f"/{path}"
    req = Request(f"HEAD {target} HTTP/1.1")
    return await BlobMetadataSlice(storage).response(req.line, req.headers, req.body)


@app.command()
def stat(
    path: str = typer.Argument(..., help="Request path, e.g. /images/logo.png"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Storage root directory"),
) -> None:
    """Print status and metadata headers for PATH; exit 1 when it is not stored."""
    storage = FileStorage(_root(root))
    rs = asyncio.run(_stat(storage, path))
    if rs.status_code != OK:
        typer.echo(f"{rs.status_code} {rs.text()}", err=True)
        raise typer.Exit(1)
    typer.echo(str(rs.status_code))
    for name, value in rs.headers:
        typer.echo(f"{name}: {value}")


@app.command()
def serve(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Storage root directory"),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
) -> None:
    """Serve HEAD requests with blob metadata (blocks)."""
    settings = load_config_from_env()
    level = (log_level or settings.log_level).upper()
    configure_logging(level)
    storage_root = root if root is not None else Path(settings.storage_root)
    logger.info("serving metadata from %s", storage_root.resolve())
    uvicorn.run(
        create_app(FileStorage(storage_root)),
        host=host or settings.host,
        port=port or settings.port,
        log_level=level.lower(),
    )


def main() -> None:
    """Entry point for the slicekit console command."""
    app()


if __name__ == "__main__":
    main()
