import logging
import traceback
from typing import Optional
from sys import exit

import click

from cli.echo import Echo
from common import definitions
from common.config import Config
from common.errors import BaseError, InvalidRegionError, NotInteractiveError, ValidationError
from common.file_utils import check_dependencies
from common.validation import validate_cluster_name, validate_region
from eks_providers import AwsCommand, ClusterParams, EksCluster

logger = logging.getLogger(__name__)

CREATE, DELETE, STATUS, QUIT = definitions.menu_options


@click.command(
    name=definitions.PROGRAM_NAME,
    context_settings=dict(help_option_names=["-h", "--help"]),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML file overriding the default region, node group and timeouts.",
)
@click.option("--debug", is_flag=True, help="Log every command that is run.")
def cli(config_path, debug):
    """Create, delete or inspect an EKS cluster running a sample application."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        check_dependencies()
        config = Config.load(config_path)
        echo = Echo()
        if not echo.is_tty_connected():
            raise NotInteractiveError(program=definitions.PROGRAM_NAME)
        exit(menu(echo, config))

    except BaseError as e:
        Echo.error(str(e))
        exit(e.get_exit_code())
    except click.Abort:
        Echo.error("Aborted!")
        exit(1)
    except Exception as e:
        Echo.error("An unexpected error occurred.")
        Echo.info(str(e))
        Echo.info(traceback.format_exc())
        exit(254)


def show_menu(echo: Echo) -> None:
    for number, option in enumerate(definitions.menu_options, start=1):
        echo.plain("{}) {}".format(number, option))


def parse_choice(choice: Optional[str]) -> Optional[str]:
    """
    Map the user's answer to a menu option, by number or by name.

    :return: the option or None when the answer matches none
    """
    choice = (choice or "").strip()
    options = definitions.menu_options
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1]
    for option in options:
        if choice.lower() == option.lower():
            return option
    return None


def prompt_cluster_params(echo: Echo, config: Config, aws: AwsCommand) -> ClusterParams:
    """
    Ask for the cluster name and region and validate both.

    :raises ValidationError: when either of them is invalid
    """
    name = echo.prompt("Enter cluster name", default="", show_default=False)
    region = echo.prompt(
        "Enter AWS region (default: {})".format(config.region),
        default=config.region,
        show_default=False,
    )
    region = region.strip() or config.region
    validate_cluster_name(name.strip())
    validate_region(region, aws)
    return ClusterParams(name=name.strip(), region=region)


def _show_validation_error(echo: Echo, error: ValidationError) -> None:
    echo.error(str(error))
    if isinstance(error, InvalidRegionError):
        echo.warning("Available regions: {}".format(" ".join(error.available_regions)))


def run_action(action: str, cluster: EksCluster) -> None:
    if action == CREATE:
        cluster.create()
    elif action == DELETE:
        cluster.destroy()
    elif action == STATUS:
        cluster.status()
    else:
        raise ValueError("Unknown action {!r}".format(action))


def menu(echo: Echo, config: Config) -> int:
    """
    Present the actions until one of them runs or the user quits.

    :return: the exit code
    """
    echo.step("=== EKS Cluster Management Script ===")
    echo.plain()
    aws = AwsCommand()

    while True:
        show_menu(echo)
        action = parse_choice(echo.prompt("Select an action", default="", show_default=False))
        if action is None:
            echo.error("Invalid option. Please try again.")
            continue
        if action == QUIT:
            echo.info("Goodbye!")
            return 0

        echo.plain()
        try:
            params = prompt_cluster_params(echo, config, aws)
        except ValidationError as validation_error:
            _show_validation_error(echo, validation_error)
            echo.plain()
            continue

        logger.debug("Running {!r} on {} in {}".format(action, params.name, params.region))
        cluster = EksCluster(params=params, echoer=echo, config=config, aws=aws)
        run_action(action, cluster)
        return 0


if __name__ == "__main__":
    cli()
