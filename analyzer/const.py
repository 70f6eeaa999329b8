"""
Constants for the Victoria II save game analyzer.
"""

import logging
from pathlib import Path

LOG_LEVEL = logging.DEBUG
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# User paths file, relative to the working directory
PATHS_FILE = Path('paths.txt')
PATHS_ENCODING = 'utf-8'

# Localisation files (<install>/localisation/*.csv)
LOCALISATION_DIR = 'localisation'
LOCALISATION_SUFFIX = '.csv'
LOCALISATION_ENCODING = 'iso-8859-1'
LOCALISATION_SEPARATOR = ';'

# Default save game folder, formatted with the OS user name
SAVE_GAME_FOLDER = 'C:/Users/{user}/Documents/Paradox Interactive/Victoria II/save games/'

PROGRAM_FILES = 'C:/Program Files'
PROGRAM_FILES_X86 = 'C:/Program Files (x86)'
PARADOX_FOLDER = '/Paradox Interactive/'
STEAM_FOLDER = '/Steam/steamapps/common/'

# Game versions, newest expansion first
VERSIONS = (
    'Victoria II - A Heart of Darkness',
    'Victoria 2 A House Divided',
    'Victoria 2',
)

# Install roots probed for every version, in order
ROOT_PREFIXES = (
    PROGRAM_FILES + PARADOX_FOLDER,
    PROGRAM_FILES + STEAM_FOLDER,
    PROGRAM_FILES_X86 + STEAM_FOLDER,
    PROGRAM_FILES_X86 + PARADOX_FOLDER,
)
