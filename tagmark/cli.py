import logging

import click

from .entities import sanitize as _sanitize
from .errors import TagNameError
from .html import TagPolicy, generate_tag

logger = logging.getLogger(__name__)


def _parse_attr(ctx, param, values):
    attributes = {}
    for value in values:
        key, sep, attr_value = value.partition('=')
        if not sep or not key:
            raise click.BadParameter(f'Expected KEY=VALUE, got {value!r}', ctx=ctx, param=param)
        attributes[key] = attr_value
    return attributes


@click.group()
@click.option('--verbose', '-v', default=False, is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument('name')
@click.argument('children', nargs=-1)
@click.option('--attr', '-a', multiple=True, callback=_parse_attr, help='Attribute as KEY=VALUE')
@click.option('--flag', '-f', multiple=True, help='Boolean attribute KEY')
@click.option('--policy', default=TagPolicy.NORMAL.value,
              type=click.Choice([p.value for p in TagPolicy]), help='Closing tag policy')
def render(name: str, children: tuple, attr: dict, flag: tuple, policy: str):
    attributes = {**attr, **{key: True for key in flag}}
    logger.debug('Rendering <%s> with %d attributes and %d children',
                 name, len(attributes), len(children))
    try:
        output = generate_tag(name, policy)(attributes, *children)
    except TagNameError as e:
        raise click.BadParameter(str(e), param_hint='NAME')
    click.echo(output)


@cli.command()
@click.argument('text', required=False)
@click.option('--amp/--no-amp', default=True, help='Escape &')
@click.option('--lt/--no-lt', default=True, help='Escape <')
@click.option('--gt/--no-gt', default=True, help='Escape >')
@click.option('--quot/--no-quot', default=True, help='Escape "')
def sanitize(text: str, amp: bool, lt: bool, gt: bool, quot: bool):
    # Input read from stdin keeps its own line endings
    from_stdin = text is None
    if from_stdin:
        text = click.get_text_stream('stdin').read()
    click.echo(_sanitize(text, amp=amp, lt=lt, gt=gt, quot=quot), nl=not from_stdin)
