#!filepath: spaceloop/cli.py
import math
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from spaceloop import __version__, init_logging
from spaceloop.config import AppConfig
from spaceloop.utils.errors import UserInputError

app = typer.Typer(help="SpaceLoop fixpoint engine CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def demo(
    budget: Optional[float] = typer.Option(None, help="wall-clock budget in seconds"),
    ceiling: Optional[int] = typer.Option(None, help="Fibonacci range ceiling"),
    delay: Optional[float] = typer.Option(None, help="delay per generated term (seconds)"),
    config: Optional[str] = typer.Option(None, help="YAML config path"),
):
    """
    运行 Fibonacci + Average 示例，直到 fixpoint 或预算耗尽
    """
    from spaceloop.workflows.space_loop_demo import run_demo

    try:
        cfg = _apply_overrides(AppConfig.load(config), budget, ceiling, delay)
    except (UserInputError, ValidationError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    init_logging(
        log_dir=cfg.log.dir,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
        log_level=cfg.log.level,
    )

    print(f"[green]Running space loop budget={cfg.scheduler.budget_seconds}s[/green]")
    outcome = run_demo(cfg)

    colour = "green" if outcome.result.converged else "yellow"
    print(f"[{colour}]reason={outcome.result.reason.value} passes={outcome.result.passes}[/{colour}]")
    print(f"sequence={list(outcome.sequence)}")
    if outcome.average is not None:
        print(f"average={outcome.average:.2f}")


def _apply_overrides(
    cfg: AppConfig,
    budget: Optional[float],
    ceiling: Optional[int],
    delay: Optional[float],
) -> AppConfig:
    if budget is not None and (math.isnan(budget) or budget < 0):
        raise UserInputError(f"--budget must be >= 0, got {budget}")
    if ceiling is not None and ceiling < cfg.demo.fib_range_low:
        raise UserInputError(f"--ceiling must be >= {cfg.demo.fib_range_low}, got {ceiling}")
    if delay is not None and (math.isnan(delay) or delay < 0):
        raise UserInputError(f"--delay must be >= 0, got {delay}")

    scheduler = cfg.scheduler
    demo_cfg = cfg.demo
    if budget is not None:
        scheduler = scheduler.model_copy(update={"budget_seconds": budget})
    if ceiling is not None:
        demo_cfg = demo_cfg.model_copy(update={"fib_range_high": ceiling})
    if delay is not None:
        demo_cfg = demo_cfg.model_copy(update={"delay_seconds": delay})
    return cfg.model_copy(update={"scheduler": scheduler, "demo": demo_cfg})


if __name__ == "__main__":
    app()

# python -m spaceloop.cli demo --budget 12
