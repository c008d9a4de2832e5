# connectify/main.py

import click

from connectify.cli.main import connectify
from connectify.gui.main_window import run_gui


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
def main():
    """
    Connectify: a desktop address book for people and companies.

    Use the 'gui' command for the graphical interface, or 'cli' followed by
    its own sub-commands for the command-line tool.

    Example (GUI): python -m connectify.main gui
    Example (CLI): python -m connectify.main cli list --entity people
    """
    pass


@click.command()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default="config.json",
              show_default=True, help="Path to the config file.")
def gui(config_path: str):
    """🎨 Launches the graphical user interface."""
    run_gui(config_path)


# --- Command Registration ---
main.add_command(gui)
main.add_command(connectify, name='cli')

if __name__ == '__main__':
    main()
