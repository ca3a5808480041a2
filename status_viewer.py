#!python3
"""dpkg status viewer main entry point."""
# pylint: disable=W0718

import argparse
import json
import sys
import traceback

import pathlibex
from control_file_loader import FileAccessError
from loggingex import generate_logger, set_init_logfile
from package_info_service import DEFAULT_SOURCE, PackageInfoService
from web_server import DEFAULT_HOST, DEFAULT_PORT, serve

SETTINGS_FILENAME = "settings.json"

DEFAULT_SETTINGS = {
    "source": DEFAULT_SOURCE,
    "host": DEFAULT_HOST,
    "port": DEFAULT_PORT,
}

EXIT_FILE_ACCESS = 2

logger = generate_logger(name=__name__, debug=__debug__, filepath=__file__)


def load_settings(filename: str = SETTINGS_FILENAME) -> dict:
    """Load settings from the data directory over the defaults.

    Parameters
    ----------
    filename : str, optional
        Settings file name under the data directory.

    Returns
    -------
    dict
        Defaults updated with the keys found in the file. A missing or
        broken file yields the defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    file_path = pathlibex.get_data_dir() / filename
    if not file_path.exists():
        return settings
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring settings file %s: %s", file_path, e)
        return settings
    if isinstance(loaded, dict):
        settings.update(
            {key: loaded[key]
             for key in DEFAULT_SETTINGS
             if key in loaded})
    return settings


def run(command: str,
        source: str,
        package_name: str = None,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        out=None) -> None:
    """Run one subcommand against ``source``.

    Parameters
    ----------
    command : str
        One of "names", "show" or "serve".
    source : str
        Control file path or URL.
    package_name : str, optional
        Package to show, required for "show".
    host : str, optional
        Address to bind for "serve".
    port : int, optional
        Port to bind for "serve".
    out : file object, optional
        Output stream, stdout by default.
    """
    out = out or sys.stdout
    service = PackageInfoService(source)
    logger.info("command: %s, source: %s", command, source)

    if command == "names":
        for name in service.get_package_names():
            print(name, file=out)
    elif command == "show":
        details = service.get_info_for(package_name)
        print(json.dumps(details.to_dict(), indent=2, ensure_ascii=False),
              file=out)
    elif command == "serve":
        serve(service, host=host, port=port)
    else:
        raise ValueError(f"unknown command: {command}")


def parse_args(argv=None, settings: dict = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list, optional
        Arguments to parse, sys.argv[1:] by default.
    settings : dict, optional
        Defaults for --source, --host and --port.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments.
    """
    settings = settings or DEFAULT_SETTINGS
    parser = argparse.ArgumentParser(
        description="Browse packages and dependencies of a dpkg status file.")
    parser.add_argument(
        "--source",
        default=settings["source"],
        help="Control file path or URL (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("names", help="List package names in file order")
    show = subparsers.add_parser("show", help="Show details of a package")
    show.add_argument("package", help="Package name")
    server = subparsers.add_parser("serve", help="Serve the JSON API")
    server.add_argument("--host", default=settings["host"], help="Bind host")
    server.add_argument("--port",
                        type=int,
                        default=int(settings["port"]),
                        help="Bind port")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the status viewer."""
    args = parse_args(argv, load_settings())
    try:
        run(
            command=args.command,
            source=args.source,
            package_name=getattr(args, "package", None),
            host=getattr(args, "host", DEFAULT_HOST),
            port=getattr(args, "port", DEFAULT_PORT),
        )
    except FileAccessError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FILE_ACCESS
    return 0


def entry_point() -> None:
    """Console script wrapper."""
    set_init_logfile()
    try:
        sys.exit(main())
    except Exception as exc:
        traceback_str = traceback.format_exc()

        print(f"Exception: {exc}", file=sys.stderr)
        print(traceback_str, file=sys.stderr)
        logger.fatal("Exception: %s\n%s", exc, traceback_str)
        sys.exit(1)


if __name__ == "__main__":
    entry_point()
