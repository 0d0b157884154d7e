from __future__ import annotations

import typer

from .bots import ignore_hit
from .config import CollectorConfig, load_config
from .hit import hit_from_request
from .request import RequestInfo
from .storage import JsonLinesStore

app = typer.Typer(help="Privacy-preserving page view collector (salted fingerprints, no raw IPs)")


@app.callback()
def app_root() -> None:
    """Hit collector commands."""


def _parse_headers(values: list[str] | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"--header must look like 'Name: value', got {raw!r}")
        headers.setdefault(name.strip(), value.strip())
    return headers


def _load(env_file: str | None) -> CollectorConfig:
    try:
        return load_config(env_file=env_file)
    except RuntimeError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("hit")
def hit_command(
    url: str = typer.Argument(..., help="Requested URL, e.g. https://example.com/blog?ref=news"),
    header: list[str] | None = typer.Option(None, "--header", "-H", help="Request header 'Name: value', repeatable."),
    remote_addr: str = typer.Option("", "--remote-addr", help="Peer address of the request."),
    path: str = typer.Option("", "--path", help="Override the stored path."),
    tenant: int | None = typer.Option(None, "--tenant", help="Tenant id saved with the hit."),
    save: bool = typer.Option(False, "--save", help="Append the hit to the configured store."),
    json_pretty: bool = typer.Option(False, "--json-pretty", help="Pretty-print the hit JSON."),
    env_file: str | None = typer.Option(None, "--env-file", help="Optional .env path for collector config."),
) -> None:
    """Build the hit for a single request and print it."""
    headers = _parse_headers(header)
    config = _load(env_file)
    request = RequestInfo.from_url(url, headers=headers, remote_addr=remote_addr)

    if ignore_hit(request, config.bot_tokens):
        typer.echo("ignored")
        return

    hit = hit_from_request(request, config.salt, config.hit_options(path=path, tenant_id=tenant))
    typer.echo(hit.model_dump_json(indent=2 if json_pretty else None))

    if save:
        JsonLinesStore(config.store_path).save_hits([hit])
        typer.echo(f"Saved hit to: {config.store_path}", err=True)


@app.command("show")
def show_command(
    limit: int = typer.Option(20, "--limit", min=1, help="Maximum number of hits to print."),
    env_file: str | None = typer.Option(None, "--env-file", help="Optional .env path for collector config."),
) -> None:
    """Print stored hits."""
    config = _load(env_file)
    for hit in JsonLinesStore(config.store_path).read_hits(limit=limit):
        typer.echo(str(hit))


if __name__ == "__main__":
    app()
