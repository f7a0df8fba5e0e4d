# Lexeme Practice - Main Package

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("lexeme_practice")
except PackageNotFoundError:
    __version__ = "dev"
