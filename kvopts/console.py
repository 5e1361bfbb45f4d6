# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for kvopts."""
from rich.console import Console
from rich.theme import Theme

KVOPTS_THEME = Theme(
    {
        "kvopts.error": "bold red",
    }
)

console = Console(theme=KVOPTS_THEME)
