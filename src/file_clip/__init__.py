"""file-clip — a clipboard for files on the command line.

Clip paths into a persistent store, then paste (copy) or move them into
a target directory.
"""

from file_clip.version import __version__

__all__: list[str] = ["__version__"]
