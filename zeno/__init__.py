"""zeno - add UI components from the zeno repository to your project."""

__version__ = "0.1.0"
