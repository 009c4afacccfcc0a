"""sprm: remove spaces and other characters from filenames."""

from sprm.config import APP_VERSION as __version__  # noqa: F401
