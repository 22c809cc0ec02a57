from __future__ import annotations

import argparse


def add_jack_option_args(parser: argparse.ArgumentParser) -> None:
    """Register Jack compiler options (compile mode only).

    Repeatable flags keep their command-line order when passed to Jack.
    """

    parser.add_argument(
        "--import",
        dest="imports",
        action="append",
        default=[],
        metavar="JACK_LIB",
        help="(compile only) Import a .jack library. Repeatable.",
    )
    parser.add_argument(
        "--classpath",
        "-cp",
        dest="classpath",
        help="(compile only) Classpath passed to Jack as -cp.",
    )
    parser.add_argument("--output-dex", help="(compile only) Directory to write classes.dex into.")
    parser.add_argument("--output-jack", help="(compile only) Write a .jack library instead of dex.")
    parser.add_argument(
        "--multi-dex",
        choices=["none", "native", "legacy"],
        help="(compile only) Multidex mode.",
    )
    parser.add_argument(
        "--verbose-mode",
        choices=["error", "warning", "info", "debug", "trace"],
        help="(compile only) Jack's own --verbose level.",
    )
    parser.add_argument(
        "--incremental-folder",
        help="(compile only) Folder Jack uses for incremental state.",
    )
    parser.add_argument(
        "--import-meta",
        dest="import_meta",
        action="append",
        default=[],
        metavar="DIR",
        help="(compile only) Import META-INF content from DIR. Repeatable.",
    )
    parser.add_argument(
        "--import-resource",
        dest="import_resource",
        action="append",
        default=[],
        metavar="DIR",
        help="(compile only) Import resources from DIR. Repeatable.",
    )
    parser.add_argument(
        "--processor",
        help="(compile only) Comma-separated annotation processor class names.",
    )
    parser.add_argument(
        "--processorpath",
        dest="processor_path",
        help="(compile only) Where to find annotation processors.",
    )
    parser.add_argument(
        "-D",
        dest="properties",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="(compile only) Jack property. Repeatable.",
    )
    parser.add_argument(
        "-A",
        dest="annotation_options",
        action="append",
        default=[],
        metavar="OPTION",
        help="(compile only) Annotation processor option. Repeatable.",
    )
    parser.add_argument("--debug", "-g", action="store_true", help="(compile only) Emit debug info.")
    parser.add_argument(
        "--env",
        dest="env_pairs",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="(compile only) Environment variable for the Jack process. Last value wins.",
    )
