"""Settings export command."""

from pathlib import Path
from typing import Optional

import click

from controlshaper.exceptions import ControlShaperError
from controlshaper.models import MAX_JOYSTICK_INSTANCES, ControlSettings, DeviceType
from controlshaper.services import ExportService, SettingsStore
from controlshaper.utils import PydanticPersistence

from .common import DEVICE_CHOICE, fail, get_state


@click.command(name="export")
@click.pass_context
@click.argument(
    "settings_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--device", "-d", type=DEVICE_CHOICE, required=True, help="Device type to export")
@click.option(
    "--instance",
    "-i",
    type=click.IntRange(1, MAX_JOYSTICK_INSTANCES),
    default=1,
    help="Joystick instance (ignored for other device types)",
)
@click.option("--invert-only", is_flag=True, help="Export inversion flags only")
def export(ctx: click.Context, settings_file: Optional[Path], device: str, instance: int,
           invert_only: bool):
    """
    Print the <options> XML for one device type and instance.

    SETTINGS_FILE is a saved settings JSON file (default: the settings_path
    of the editor config).
    """
    state = get_state(ctx)
    device_type = DeviceType(device.lower())

    try:
        config = state.load_config()
        path = settings_file or config.settings_path
        settings = PydanticPersistence.load_json(path, ControlSettings)
    except (ControlShaperError, FileNotFoundError) as e:
        fail(e, state)

    service = ExportService(
        SettingsStore(settings),
        include_curves=config.export_curves and not invert_only,
    )
    xml = service.render_options_xml(device_type, instance)
    if xml is None:
        instance = SettingsStore.normalize_instance(device_type, instance)
        click.echo(f"No overrides for {device_type.value} instance {instance}")
        return

    click.echo(xml, nl=False)
