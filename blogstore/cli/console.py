"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import TYPE_CHECKING, Any

from rich.console import Console as RichConsole
from rich.panel import Panel

if TYPE_CHECKING:
    from blogstore.domain.post.query.get_post import PostDetail


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None, quiet: bool = False) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def post_detail(self, post: "PostDetail") -> None:
        """Print a single post in a panel."""
        lines = [post.content, ""]

        meta_parts = [
            f"[cyan]Author:[/cyan] {post.author}",
            f"[cyan]Likes:[/cyan] {post.likes}",
            f"[cyan]Created:[/cyan] {post.created_at:%Y-%m-%d %H:%M}",
        ]
        if post.updated_at is not None:
            meta_parts.append(f"[cyan]Updated:[/cyan] {post.updated_at:%Y-%m-%d %H:%M}")
        lines.append("    ".join(meta_parts))
        if post.categories:
            lines.append(f"[cyan]Categories:[/cyan] {', '.join(post.categories)}")

        self._console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{post.title}[/bold]",
                subtitle=f"[dim]#{post.id}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
