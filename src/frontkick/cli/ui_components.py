"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite que `main` y `doctor` reutilicen los mismos paneles y tablas.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from frontkick import __version__
from frontkick.core.domain.results import Failure, ProvisionState, RunReport


def print_banner(console: Console) -> None:
    title = Text("frontkick", style="bold cyan")
    subtitle = Text(f"v{__version__} • React / Vite / Next.js • git • GitHub", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_summary_table(report: RunReport) -> Table:
    """Summary of a finished run (one row per step)."""

    table = Table(title="Summary")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Result", style="white")

    if report.request is not None:
        template = report.request.template.label()
        if report.request.options:
            template += " (" + ", ".join(o.value for o in report.request.options) + ")"
        table.add_row("Template", template)
    if report.project_dir is not None:
        table.add_row("Project", str(report.project_dir))
        table.add_row("Local repository", "initialized")

    outcome = report.provision
    if outcome is None:
        table.add_row("GitHub", "-")
    elif outcome.state is ProvisionState.SKIPPED:
        table.add_row("GitHub", "skipped")
    elif outcome.state is ProvisionState.PUSHED and outcome.remote is not None:
        table.add_row("GitHub", outcome.remote.html_url or outcome.remote.clone_url)
        table.add_row("Pushed branch", outcome.branch or "-")
    else:
        table.add_row("GitHub", "[yellow]failed[/yellow]")
    return table


def build_failure_panel(failure: Failure) -> Panel:
    body = Text()
    body.append(failure.message + "\n", style="bold")
    if failure.step:
        body.append(f"\nStep: {failure.step}")
    if failure.exit_code is not None:
        body.append(f"\nExit code: {failure.exit_code}")
    if failure.output.strip():
        body.append("\n\n" + failure.output.strip(), style="dim")
    title = Text(f"{failure.kind.value} failure", style="bold red")
    return Panel(body, title=title, border_style="red")
