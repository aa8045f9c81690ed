import logging
import os

import click
import yaml

from volmeta.cli.volumes import volumes
from volmeta.config.settings import config


def _check_volume_spec(spec):
    if not isinstance(spec, dict):
        return "expected a mapping with 'account' and 'options'"
    if not isinstance(spec.get("account", ""), str):
        return "'account' must be a string"
    options = spec.get("options") or {}
    if not isinstance(options, dict):
        return "'options' must be a mapping of option names to values"
    for key, value in options.items():
        if not isinstance(value, str):
            return f"option '{key}' must be a plain value"
    return None


@click.group()
@click.option("--metadata-dir", default=None, help="Directory holding the volume metadata files.")
@click.pass_context
def main(ctx, metadata_dir):
    """Volume metadata CLI"""
    logging.basicConfig(level=config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["metadata_dir"] = metadata_dir

main.add_command(volumes)

@main.command()
@click.option("--config", "config_file", help="Path to the configuration file.")
@click.pass_context
def apply(ctx, config_file):
    """Create the volumes described in a configuration file."""
    if config_file:
        config_path = config_file
    elif os.path.exists("volmeta.yaml"):
        config_path = "volmeta.yaml"
    elif os.path.exists(os.path.expanduser("~/.config/volmeta/volmeta.yaml")):
        config_path = os.path.expanduser("~/.config/volmeta/volmeta.yaml")
    elif os.path.exists("/etc/volmeta/volmeta.yaml"):
        config_path = "/etc/volmeta/volmeta.yaml"
    else:
        raise click.FileError("volmeta.yaml", hint="Configuration file not found.")

    with open(config_path, "r") as f:
        # BaseLoader keeps every scalar as written, so `filemode: 0644` stays "0644"
        full_config = yaml.load(f, Loader=yaml.BaseLoader) or {}

    from volmeta.volumes.errors import MetadataError
    from volmeta.volumes.manager import VolumeMetadataManager
    from volmeta.volumes.store import MetadataStore

    volumes_config = (full_config.get("volumes") or {}) if isinstance(full_config, dict) else None
    if not isinstance(volumes_config, dict):
        click.echo(f"Error in {config_path}: 'volumes' must be a mapping of volume names.", err=True)
        ctx.exit(1)

    manager = VolumeMetadataManager(store=MetadataStore(ctx.obj.get("metadata_dir")))
    failed = False
    for name, spec in volumes_config.items():
        spec = spec or {}
        problem = _check_volume_spec(spec)
        if problem:
            click.echo(f"Error applying volume '{name}': {problem}", err=True)
            failed = True
            continue
        try:
            manager.create(name, spec.get("account", config.default_account), spec.get("options") or {})
            click.echo(f"Volume '{name}' applied.")
        except MetadataError as e:
            click.echo(f"Error applying volume '{name}': {e}", err=True)
            failed = True

    if failed:
        ctx.exit(1)


@main.command()
@click.option('--host', default='127.0.0.1', help='The host to bind to.')
@click.option('--port', default=8000, help='The port to bind to.')
def server(host, port):
    """Run the FastAPI server."""
    import uvicorn

    from volmeta.api.server import app
    uvicorn.run(app, host=host, port=port)
