# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for the seiargs command line tool."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
