"""CLI implementation for security_txt."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from .core.model import SecurityTxtError
from .core.util import document_asdict, failure_asdict
from .io import is_remote
from .io.base import DEFAULT_TIMEOUT
from .io.http_async import HTTPXFetcher, close_global_client
from .io.http_sync import RequestsFetcher
from .parser import DocumentParser
from .resolver import LocationResolver

app = typer.Typer(add_completion=False, help="Parse security.txt files from paths and URLs.")


def iter_sources(files: list[str]) -> list[str]:
    """Get list of sources from files argument or stdin."""
    if "-" in files:
        # stdin mode
        return [ln.strip() for ln in sys.stdin if ln.strip()]
    elif files:
        return list(files)
    return []


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _outcome(source: str, doc=None, error: Optional[Exception] = None, fields=None) -> Dict[str, Any]:
    if error is not None:
        return {"source": source, **failure_asdict(error)}
    return {"source": source, "success": True, **document_asdict(doc, fields=fields)}


def _read_one(resolver: LocationResolver, src: str, fields) -> Dict[str, Any]:
    try:
        if is_remote(src):
            doc = resolver.resolve(src)
        else:
            doc = resolver.parser.parse_file(Path(src).resolve())
    except (SecurityTxtError, OSError) as e:
        return _outcome(src, error=e)
    return _outcome(src, doc, fields=fields)


async def _read_one_async(resolver: LocationResolver, src: str, fields) -> Dict[str, Any]:
    if not is_remote(src):
        return _read_one(resolver, src, fields)
    try:
        doc = await resolver.resolve_async(src)
    except SecurityTxtError as e:
        return _outcome(src, error=e)
    return _outcome(src, doc, fields=fields)


async def _batch_read(resolver: LocationResolver, sources: list[str], fields) -> list[Dict[str, Any]]:
    """Resolve all sources concurrently; each resolution stays sequential."""
    try:
        return list(await asyncio.gather(*(_read_one_async(resolver, s, fields) for s in sources)))
    finally:
        await close_global_client()


@app.command()
def main(
    files: list[str] = typer.Argument(None, help="Files or URLs to process, or '-' for stdin"),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated subset of keys to emit"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    use_async: bool = typer.Option(False, "--async", help="Resolve URLs with asynchronous I/O"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", min=0.1, help="HTTP timeout in seconds"),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="Log retries (-v) or every field (-vv)"),
):
    """Parse security.txt from one or many local paths or URLs."""
    _configure_logging(verbose)
    sel_fields = set(fields.split(",")) if fields else None
    sources = iter_sources(files or [])

    if not sources:
        typer.echo("No input files given.", err=True)
        raise typer.Exit(code=1)

    resolver = LocationResolver(
        parser=DocumentParser(),
        fetcher=RequestsFetcher(timeout),
        async_fetcher=HTTPXFetcher(timeout),
    )
    if use_async:
        results = asyncio.run(_batch_read(resolver, sources, sel_fields))
    else:
        results = [_read_one(resolver, src, sel_fields) for src in sources]

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        # choose output style
        if len(sources) == 1 and not jsonl:
            json.dump(results[0], sink, indent=2)
            sink.write("\n")
        else:
            for obj in results:
                sink.write(json.dumps(obj))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r["success"] for r in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
