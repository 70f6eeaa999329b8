#!/usr/bin/env python3
"""
Show or store the Victoria II save game and install folders.

Usage:
    uv run python scripts/configure_paths.py
    uv run python scripts/configure_paths.py --save-games "D:/saves/" --install "E:/game"

Without arguments the folders from paths.txt (or the auto-detected ones) are
printed. With both arguments they are written to paths.txt.
"""

import argparse

from analyzer.folders import resolve, save_paths
from analyzer.log import log


def main() -> None:
    parser = argparse.ArgumentParser(description='Show or store the game folders')
    parser.add_argument('--save-games', '-s', help='Save game folder to store')
    parser.add_argument('--install', '-i', help='Install folder to store')

    args = parser.parse_args()

    if args.save_games is not None or args.install is not None:
        if args.save_games is None or args.install is None:
            parser.error('--save-games and --install must be given together')
        save_paths(args.save_games, args.install)
        return

    save_game_dir, install_dir = resolve()
    log.info(f'Save game folder: {save_game_dir or "(not found)"}')
    log.info(f'Install folder: {install_dir or "(not found)"}')


if __name__ == '__main__':
    main()
