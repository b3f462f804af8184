"""Command line launcher for the OSC message builder."""

import click
import dotenv
import json
import logging
import sys

from typing import Optional

from . import logger
from .configurator import AppConfigurator, MessageSettings
from .errors import OSCMessageError
from .logger import log as base_log
from .message import AUTO, BooleanCoercion, format_message
from .version import __version__

log = base_log.getChild("launcher")


@click.command()
@click.argument("address", required=False)
@click.argument("data", required=False)
@click.option(
    "-c",
    "--config",
    type=click.Path(resolve_path=True),
    help="Name of the configuration file to load; defaults to "
    "oscmsg.cfg in the current directory",
)
@click.option(
    "-t",
    "--type-tags",
    default=AUTO,
    show_default=True,
    help="Explicit OSC type tag string to use instead of deriving it from the data",
)
@click.option("--integer-tag", metavar="TAG", help="Type tag to use for integers")
@click.option("--double-tag", metavar="TAG", help="Type tag to use for floats")
@click.option("--text-tag", metavar="TAG", help="Type tag to use for strings")
@click.option("--null-tag", metavar="TAG", help="Type tag to use for null values")
@click.option(
    "--comma/--no-comma",
    default=None,
    help="Whether the derived type tag string should start with a comma",
)
@click.option(
    "--booleans",
    type=click.Choice([item.value for item in BooleanCoercion] + ["logical"]),
    default=None,
    help="Convert booleans to integers or floats before tagging them",
)
@click.option("-d", "--debug/--no-debug", default=False, help="Show debug messages")
@click.option("-q", "--quiet/--no-quiet", default=False, help="Show errors only")
@click.option(
    "--log-style",
    type=click.Choice(sorted(logger.styles)),
    default="fancy",
    help="Specify the style of the logging output",
)
@click.version_option(version=__version__)
def start(
    address: Optional[str],
    data: Optional[str],
    config: Optional[str],
    type_tags: str = AUTO,
    integer_tag: Optional[str] = None,
    double_tag: Optional[str] = None,
    text_tag: Optional[str] = None,
    null_tag: Optional[str] = None,
    comma: Optional[bool] = None,
    booleans: Optional[str] = None,
    debug: bool = False,
    quiet: bool = False,
    log_style: str = "fancy",
):
    """Print the textual representation of an OSC message.

    ADDRESS is the OSC address pattern of the message. DATA is a JSON
    document holding the arguments of the message; arrays and objects are
    flattened.
    """
    logger.install(
        level=logging.DEBUG if debug else logging.ERROR if quiet else logging.WARN,
        style=log_style,
    )

    # Load environment variables from .env
    dotenv.load_dotenv(verbose=debug)

    configurator = AppConfigurator(
        default_filename="oscmsg.cfg",
        environment_variable="OSCMSG_SETTINGS",
        log=log,
        package_name=__package__,
    )
    if not configurator.configure(config):
        raise click.ClickException("Failed to load the configuration")

    try:
        settings = MessageSettings.from_configuration(configurator.result)

        overrides = {
            "integer": integer_tag,
            "double": double_tag,
            "text": text_tag,
            "null": null_tag,
            "leading_comma": comma,
        }
        alphabet = settings.alphabet.replace(
            **{key: value for key, value in overrides.items() if value is not None}
        )
        coercion = (
            BooleanCoercion.from_string(booleans)
            if booleans is not None
            else settings.boolean_coercion
        )

        try:
            parsed = json.loads(data) if data is not None else None
        except ValueError as ex:
            raise click.ClickException(f"DATA is not valid JSON: {ex}") from None

        message = format_message(
            address if address is not None else settings.address,
            parsed,
            type_tags,
            alphabet,
            boolean_coercion=coercion,
        )
    except (OSCMessageError, ValueError) as ex:
        log.debug("Failed to build OSC message", exc_info=True)
        raise click.ClickException(str(ex)) from None

    click.echo(message)


if __name__ == "__main__":
    sys.exit(start(prog_name="oscmsg"))
