"""Rich-powered console output for relgraph."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from relgraph import __version__
from relgraph.graph.models import (
    CousinResult,
    DescendantResult,
    Node,
    PathResult,
    QueryStatus,
    SiblingResult,
)


class Console:
    """Terminal rendering of relationship query results."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def banner(self) -> None:
        self.console.print(
            Panel(
                f"[bold cyan]relgraph[/bold cyan] [dim]v{__version__}[/dim]\n"
                "[dim]Who is related to whom, and how[/dim]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_stats(self, stats: dict) -> None:
        """Display graph statistics in a table."""
        table = Table(title="Relationship Graph Statistics", border_style="cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Count", justify="right", style="cyan")

        table.add_row("People", str(stats.get("total_nodes", 0)))
        table.add_row("Relationships", str(stats.get("total_edges", 0)))
        if "orphans" in stats:
            table.add_row("Orphans", str(stats["orphans"]))

        edge_labels = stats.get("edge_labels", {})
        if edge_labels:
            table.add_section()
            for label, count in sorted(edge_labels.items(), key=lambda x: -x[1]):
                table.add_row(f"  {escape(label)} edges", str(count))

        self.console.print(table)

    def show_node(self, node: Node) -> None:
        tree = Tree(f"[bold cyan]{escape(node.name)}[/bold cyan]")
        for edge in node.edges:
            tree.add(f"[dim]{escape(edge.label)}[/dim] [bold]{escape(edge.target)}[/bold]")
        self.console.print(tree)

    def show_dump(self, lines: list[str]) -> None:
        for line in lines:
            self.console.print(escape(line))

    def show_names(self, names: list[str]) -> None:
        for name in names:
            self.console.print(f"  [bold]{escape(name)}[/bold]")

    def show_orphans(self, orphans: list[str]) -> None:
        if not orphans:
            self.warning("No orphans found.")
            return
        self.info(f"{len(orphans)} orphan(s):")
        self.show_names(orphans)

    def show_siblings(self, result: SiblingResult) -> None:
        if result.status == QueryStatus.NOT_FOUND:
            self.error(f"{result.name} not found.")
            return
        if not result.siblings:
            self.warning(f"{result.name} has no siblings.")
            return
        self.info(f"{result.name}'s siblings:")
        self.show_names(result.siblings)

    def show_descendants(self, result: DescendantResult) -> None:
        """Display descendants as a tree, one level per generation."""
        if result.status == QueryStatus.NOT_FOUND:
            self.error(f"{result.root} not found.")
            return
        if not result.descendants:
            self.warning(f"{result.root} has no descendants.")
        else:
            tree = Tree(f"[bold cyan]{escape(result.root)}[/bold cyan]")
            depth_nodes: dict[int, Tree] = {-1: tree}
            for d in result.descendants:
                parent = depth_nodes.get(d.depth - 1, tree)
                depth_nodes[d.depth] = parent.add(
                    f"[dim]{escape(d.generation)}[/dim] [bold]{escape(d.name)}[/bold]"
                )
            self.console.print(tree)
        if result.cycle_detected:
            self.error("Cycle found!")

    def show_path(self, result: PathResult) -> None:
        if result.status == QueryStatus.NOT_FOUND:
            missing = " and ".join(result.missing)
            verb = "does" if len(result.missing) == 1 else "do"
            self.error(f"{missing} {verb} not exist")
            return
        if result.status == QueryStatus.NO_PATH:
            self.warning("No path found!")
            return
        self.info(f"{result.source} to {result.target} in {len(result.edges)} step(s):")
        for description in result.descriptions:
            self.console.print(f"  {escape(description)}")

    def show_cousins(self, result: CousinResult) -> None:
        if result.status == QueryStatus.NOT_FOUND:
            self.error(f"{result.name} not found.")
            return
        if not result.cousins:
            self.warning("No cousins at specified level found")
            return
        self.info(
            f"{result.name}'s cousins (number {result.number}, removed {result.removed}):"
        )
        self.show_names(result.cousins)
