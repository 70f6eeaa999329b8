#!/usr/bin/env python3
"""
Print the official names of countries from the Victoria II localisation files.

Usage:
    uv run python scripts/print_localisation.py ENG FRA PRU
    uv run python scripts/print_localisation.py ENG --install "D:/Games/Victoria 2"

Without --install the install folder from paths.txt (or the default
locations) is used.
"""

import argparse
from pathlib import Path

from analyzer.folders import resolve
from analyzer.localisation import load_localisation
from analyzer.log import log
from analyzer.model import Country


def main() -> None:
    parser = argparse.ArgumentParser(description='Print official country names from localisation files')
    parser.add_argument('tags', nargs='+', help='Country tags, e.g. ENG FRA')
    parser.add_argument(
        '--install',
        '-i',
        type=Path,
        help='Game install folder (default: from paths.txt or auto-detected)',
    )

    args = parser.parse_args()

    install_dir = args.install or resolve().install_dir
    if not install_dir:
        log.error('Install folder not found, pass --install')
        return

    registry = {tag: Country(tag) for tag in args.tags}
    log.info(f'Reading localisation from: {install_dir}')
    load_localisation(install_dir, registry)

    for tag in sorted(registry):
        country = registry[tag]
        if country.official_name:
            log.info(f'  {tag}: {country.official_name}')
        else:
            log.warning(f'  {tag}: no localisation found')


if __name__ == '__main__':
    main()
