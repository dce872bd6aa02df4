"""podlint - runs ``pod lib lint`` over the plugin podspecs of a packages tree."""

__version__ = "0.1.0"
