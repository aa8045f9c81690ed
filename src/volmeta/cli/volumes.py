import click


def _parse_options(values):
    options = {}
    for value in values:
        if "=" not in value:
            raise click.BadParameter(f"expected key=value, got '{value}'", param_hint="--opt")
        key, _, val = value.partition("=")
        options[key] = val
    return options


def _get_manager(ctx):
    from volmeta.volumes.manager import VolumeMetadataManager
    from volmeta.volumes.store import MetadataStore
    return VolumeMetadataManager(store=MetadataStore(ctx.obj.get("metadata_dir")))


@click.group()
def volumes():
    """Manage volume metadata."""
    pass

@volumes.command(name="list")
@click.pass_context
def list_volumes(ctx):
    """List stored volumes."""
    from volmeta.volumes.errors import MetadataError
    try:
        names = _get_manager(ctx).list()
    except MetadataError as e:
        click.echo(f"Error listing volumes: {e}", err=True)
        ctx.exit(1)

    if not names:
        click.echo("No volumes found.")
        return

    for name in names:
        click.echo(name)

@volumes.command(name="get")
@click.argument("name")
@click.pass_context
def get_volume(ctx, name):
    """Show the stored metadata of a volume."""
    from volmeta.volumes.errors import MetadataError
    try:
        metadata = _get_manager(ctx).get(name)
    except MetadataError as e:
        click.echo(f"Error reading volume: {e}", err=True)
        ctx.exit(1)

    click.echo(metadata.model_dump_json(by_alias=True, indent=2))

@volumes.command(name="create")
@click.argument("name")
@click.option("--account", default=None, help="Owning account (defaults to VOLMETA_DEFAULT_ACCOUNT)")
@click.option("-o", "--opt", "opts", multiple=True, help="Driver option as key=value, may be repeated")
@click.pass_context
def create_volume(ctx, name, account, opts):
    """Validate options and store metadata for a volume."""
    from volmeta.config.settings import config
    from volmeta.volumes.errors import MetadataError
    options = _parse_options(opts)
    try:
        _get_manager(ctx).create(name, account if account is not None else config.default_account, options)
    except MetadataError as e:
        click.echo(f"Error creating volume: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Volume '{name}' created.")

@volumes.command(name="delete")
@click.argument("name")
@click.pass_context
def delete_volume(ctx, name):
    """Delete the metadata of a volume."""
    from volmeta.volumes.errors import MetadataError
    try:
        _get_manager(ctx).delete(name)
    except MetadataError as e:
        click.echo(f"Error deleting volume: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Volume '{name}' deleted.")

@volumes.command(name="options")
def list_options():
    """List the recognized driver options."""
    from volmeta.volumes.validator import RECOGNIZED_OPTIONS
    for option in sorted(RECOGNIZED_OPTIONS):
        click.echo(option)
