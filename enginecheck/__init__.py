"""enginecheck — verify active node/npm/yarn versions against package.json."""

__version__ = "0.1.0"
