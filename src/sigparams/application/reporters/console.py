"""Console reporter: MethodInfo → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sigparams.application.parsing.formatter import format_signature
from sigparams.domain.model.hooks import hook_label

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sigparams.domain.model.method_info import MethodInfo
    from sigparams.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in columns.
        show_hooks: Show build_args/check_args hooks under each table.
        show_signature: Show canonical signature text above each table.
    """

    width: int = 120
    show_hooks: bool = True
    show_signature: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


class ConsoleReporter:
    """Console reporter: one parameter table per declared method.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, methods: Iterable[MethodInfo]) -> str:
        """Format method metadata as rich formatted string.

        Args:
            methods: Published method metadata.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        # named parameters start with ":" and must not be read as emoji codes
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False, emoji=False
        )

        infos = tuple(methods)
        console.print()
        console.rule("[bold]DECLARED METHODS[/bold]")
        console.print()
        console.print(f"[bold]Methods:[/bold] {len(infos)}")
        console.print()

        for info in infos:
            self._render_method(console, info)

        return output.getvalue()

    def _render_method(self, console: Console, info: MethodInfo) -> None:
        console.print(f"[yellow]{escape(info.qualified_name)}[/yellow]")
        if self._config.show_signature:
            console.print(f"  [dim]({escape(format_signature(info.signature))})[/dim]")

        if len(info.signature):
            table = Table(show_header=True, header_style="bold")
            table.add_column("Parameter")
            table.add_column("Kind")
            table.add_column("Required")
            table.add_column("Type")
            table.add_column("Default")
            for param in info.signature:
                table.add_row(
                    escape(param.name),
                    _kind_label(param),
                    "yes" if param.required else "no",
                    escape(_type_label(param)),
                    escape(_default_label(param)),
                )
            console.print(table)
        else:
            console.print("  [dim]no parameters[/dim]")

        if self._config.show_hooks and not info.hooks.is_empty:
            for role, ref in (("build_args", info.hooks.build_args), ("check_args", info.hooks.check_args)):
                if ref is not None:
                    console.print(f"  {role}: {escape(hook_label(ref) or '')}")

        console.print()


def _kind_label(param: Parameter) -> str:
    if param.is_invocant:
        return "invocant"
    if param.slurpy:
        return "slurpy"
    if param.bind_only:
        return "bind-only"
    if param.is_named:
        if param.external_name != param.name:
            return f"named ({param.external_name})"
        return "named"
    return f"positional #{param.index}"


def _type_label(param: Parameter) -> str:
    if param.type_name is None:
        return "-"
    return f"&{param.type_name}" if param.coerce else param.type_name


def _default_label(param: Parameter) -> str:
    if param.builder is not None:
        return f"builder {param.builder}"
    if param.default is not None:
        return repr(param.default)
    return "-"
