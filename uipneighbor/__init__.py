"""Link-local neighbour table and stack configuration options."""

__version__ = "0.1.0"
__all__ = ["neighbor", "options"]