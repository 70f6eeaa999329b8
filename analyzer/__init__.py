"""Victoria II save game analyzer support: localisation and folder discovery."""

from analyzer.folders import PathPair, PathsWriteError, directory_of, resolve, save_paths
from analyzer.localisation import LocalisationDirError, load_localisation

__all__ = [
    'LocalisationDirError',
    'PathPair',
    'PathsWriteError',
    'directory_of',
    'load_localisation',
    'resolve',
    'save_paths',
]
