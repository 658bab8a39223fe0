"""Command line entry points for HabitTrack."""

from __future__ import annotations

from datetime import date, timedelta

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .models.habit import Habit, HabitStatus
from .models.user import User
from .services.habits import complete_habit, status_summary

_DEMO_HABITS = [
    ("Morning run", "5 km before work", 12),
    ("Read", "20 pages a day", 30),
    ("Meditate", "10 minutes", 3),
    ("No sugar", "", 45),
]


def seed_demo(ctx: AppContext, *, today: date | None = None) -> User:
    """Register a demo user with a handful of habits in different states."""

    today = today or date.today()
    user = ctx.user_repo.register("Demo", "demo@example.com")
    for name, description, age_days in _DEMO_HABITS:
        ctx.habit_repo.add(
            user,
            Habit(name=name, description=description, created_on=today - timedelta(days=age_days)),
        )

    habits = ctx.habit_repo.get_all(user) or []
    for offset in range(3):
        complete_habit(
            ctx.habit_repo, ctx.habit_history, user, habits[0].id, on=today - timedelta(days=offset)
        )
    ctx.habit_repo.update_status(user, habits[-1], HabitStatus.FINISHED)
    return user


def _echo_habits(title: str, habits: list[Habit] | None) -> None:
    click.secho(title, bold=True)
    if not habits:
        click.echo("  (none)")
        return
    for habit in habits:
        click.echo(
            f"  #{habit.id:<3} {habit.name:<14} {habit.status.value:<12} {habit.created_on.isoformat()}"
        )


@click.group()
def cli() -> None:
    """HabitTrack command line."""


@cli.command("info")
def info() -> None:
    """Print the resolved configuration."""

    try:
        config = BaseConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    for key, value in config.as_dict().items():
        click.echo(f"{key}: {value}")


@cli.command("demo")
@click.option("--finish-all", is_flag=True, default=False, help="Mark every habit finished")
def demo(finish_all: bool) -> None:
    """Seed an in-memory demo dataset and print its views."""

    try:
        ctx = create_app_context()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    user = seed_demo(ctx)
    if finish_all:
        ctx.habit_repo.set_all_finished(user)

    _echo_habits("All habits", ctx.habit_repo.get_all(user))
    _echo_habits("By status", ctx.habit_repo.get_sorted_by_status(user))
    _echo_habits("By creation date", ctx.habit_repo.get_sorted_by_creation_date(user))

    summary = status_summary(ctx.habit_repo.get_all(user) or [])
    click.echo(" ".join(f"{status.value}={count}" for status, count in summary.items()))

    first = (ctx.habit_repo.get_all(user) or [])[0]
    record = ctx.habit_history.get_history(first.id)
    click.echo(
        f"Streak for {first.name!r} since {record.opened_on.isoformat()}: "
        f"current={ctx.habit_history.current_streak(first.id)} "
        f"longest={ctx.habit_history.longest_streak(first.id)}"
    )


def main() -> None:  # pragma: no cover - console script
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
