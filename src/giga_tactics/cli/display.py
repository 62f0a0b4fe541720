"""Rich terminal rendering of move and loot recommendations."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from giga_tactics.engine.decisions import CombatDecision, LootDecision
from giga_tactics.mechanics.loot_strategies import LOOT_STRATEGIES, LootStrategyName
from giga_tactics.models.combat import MoveEvaluation
from giga_tactics.models.loot import LootOption
from giga_tactics.utils import format_number

console = Console()


class AdvisorDisplay:
    def __init__(self, show_outcomes: bool = True) -> None:
        self.console = console
        self.show_outcomes = show_outcomes

    def _outcome_summary(self, evaluation: MoveEvaluation) -> str:
        parts = []
        for enemy_move, outcome in evaluation.outcomes.items():
            parts.append(
                f"{enemy_move}: +{outcome.player_damage_dealt}/-{outcome.player_damage_taken}"
            )
        return ", ".join(parts)

    def show_move_decision(self, decision: CombatDecision) -> None:
        result = decision.result
        table = Table(title="Move Evaluations", box=box.ROUNDED)
        table.add_column("Move", style="bold")
        table.add_column("EV", justify="right")
        table.add_column("Flags")
        if self.show_outcomes:
            table.add_column("Vs enemy (dealt/taken)", style="dim")

        for evaluation in result.all_evaluations:
            flags = []
            if evaluation.would_exhaust_charges:
                flags.append("[yellow]last charge[/yellow]")
            if evaluation.guarantees_victory:
                flags.append("[green]lethal[/green]")
            style = "cyan" if evaluation is result.evaluation else ""
            row = [evaluation.label, f"{evaluation.expected_value:.2f}", " ".join(flags)]
            if self.show_outcomes:
                row.append(self._outcome_summary(evaluation))
            table.add_row(*row, style=style)

        self.console.print(table)
        self.console.print(Panel(
            escape(decision.reasoning),
            title=f"Recommended: {result.evaluation.label}",
            border_style="green",
            box=box.ROUNDED,
        ))

    def show_loot_decision(self, options: list[LootOption], decision: LootDecision) -> None:
        table = Table(title="Loot Options", box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("Boon")
        table.add_column("Rarity", justify="right")
        table.add_column("Values", justify="right")
        table.add_column("Score", justify="right")

        for i, (option, score) in enumerate(zip(options, decision.scores)):
            style = "cyan" if i == decision.index else ""
            table.add_row(
                str(i),
                option.boon_type or "?",
                str(option.rarity_tier),
                f"{format_number(option.upgrade_value_1)}, {format_number(option.upgrade_value_2)}",
                f"{score:.2f}",
                style=style,
            )

        self.console.print(table)
        self.console.print(Panel(
            escape(decision.explanation),
            title=f"Pick option {decision.index}",
            border_style="green",
            box=box.ROUNDED,
        ))

    def show_strategies(self, default: LootStrategyName | None = None) -> None:
        table = Table(title="Loot Strategies", box=box.SIMPLE)
        table.add_column("Name", style="bold")
        table.add_column("Title")
        table.add_column("Description")
        for name, strategy in LOOT_STRATEGIES.items():
            label = name.value
            if name == default:
                label += " (default)"
            table.add_row(label, strategy.title, strategy.description)
        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
